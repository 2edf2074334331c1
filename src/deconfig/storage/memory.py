"""In-memory storage, mostly used as the active side and in tests."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from ..exceptions import StorageError
from .base import StorageInterface
from .codec import decode_yaml, encode_yaml


class MemoryStorage(StorageInterface):
    def __init__(
        self,
        records: Optional[Dict[str, Dict[str, Any]]] = None,
        collection: str = StorageInterface.DEFAULT_COLLECTION,
        *,
        _backend: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> None:
        self._collection = collection
        self._backend: Dict[str, Dict[str, Any]] = _backend if _backend is not None else {}
        bucket = self._backend.setdefault(collection, {})
        for name, data in (records or {}).items():
            bucket[name] = copy.deepcopy(data)

    @property
    def _records(self) -> Dict[str, Any]:
        return self._backend.setdefault(self._collection, {})

    def exists(self, name: str) -> bool:
        return name in self._records

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        if name not in self._records:
            return None
        return copy.deepcopy(self._records[name])

    def write(self, name: str, data: Dict[str, Any]) -> bool:
        self._records[name] = copy.deepcopy(data)
        return True

    def delete(self, name: str) -> bool:
        if name not in self._records:
            return False
        del self._records[name]
        return True

    def rename(self, name: str, new_name: str) -> bool:
        if name not in self._records:
            raise StorageError(f"Cannot rename missing record: {name}")
        self._records[new_name] = self._records.pop(name)
        return True

    def encode(self, data: Any) -> bytes:
        return encode_yaml(data)

    def decode(self, raw: bytes | str) -> Any:
        return decode_yaml(raw)

    def list_all(self, prefix: str = "") -> List[str]:
        return sorted(name for name in self._records if name.startswith(prefix))

    def create_collection(self, collection: str) -> "MemoryStorage":
        return MemoryStorage(collection=collection, _backend=self._backend)

    def get_all_collection_names(self) -> List[str]:
        return sorted(
            name
            for name, records in self._backend.items()
            if name != self.DEFAULT_COLLECTION and records
        )

    def get_collection_name(self) -> str:
        return self._collection


__all__ = ["MemoryStorage"]
