"""Repair sweep removing hidden configuration that leaked into the sync storage."""
from __future__ import annotations

from typing import List

import structlog

from .exceptions import ConsistencyViolation
from .storage.base import StorageInterface
from .storage.deconfig import DeconfigStorage

logger = structlog.get_logger(__name__)


def remove_hidden(storage: StorageInterface) -> List[str]:
    """Rewrite every record whose verified read fails.

    Writing back the raw read re-applies redaction against the current active
    storage. Returns the repaired record names; names from a named collection are
    qualified as ``collection:name``.
    """

    if not isinstance(storage, DeconfigStorage):
        logger.error("maintenance.misconfigured", storage=type(storage).__name__)
        return []

    repaired: List[str] = []
    collections = [StorageInterface.DEFAULT_COLLECTION, *storage.get_all_collection_names()]
    for collection in collections:
        scoped = storage.create_collection(collection)
        for name in scoped.list_all():
            try:
                scoped.read(name)
            except ConsistencyViolation:
                scoped.write(name, scoped.read_raw(name))
                label = f"{collection}:{name}" if collection else name
                logger.info("maintenance.repaired", record=name, collection=collection)
                repaired.append(label)
    return repaired


__all__ = ["remove_hidden"]
