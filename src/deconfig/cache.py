"""Pre-delete snapshots that let lax values survive a delete-then-write cycle."""
from __future__ import annotations

import copy
from typing import Dict, Iterator, Optional

from .models import Mapping


class DeletedCache:
    """Remember a record's payload between ``delete`` and the next ``write``.

    Full exports delete every record and write them all again. Without the
    snapshot the write would see an empty sync storage and lax values would be
    lost. Each entry is handed out at most once.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Mapping] = {}

    def remember(self, name: str, payload: Mapping) -> None:
        self._entries[name] = copy.deepcopy(payload)

    def consume(self, name: str) -> Optional[Mapping]:
        return self._entries.pop(name, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


__all__ = ["DeletedCache"]
