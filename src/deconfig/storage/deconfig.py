"""Storage that hides configuration fields from a wrapped sync storage."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog

from ..cache import DeletedCache
from ..models import Mapping
from ..redactor import hide, unhide
from ..splitter import rejoin, split
from .base import StorageInterface

logger = structlog.get_logger(__name__)


class DeconfigStorage(StorageInterface):
    """Wrap a sync storage so hidden fields never reach it.

    Records carrying a ``_deconfig`` (or lax ``@_deconfig``) specification are
    redacted on :meth:`write` and restored from ``active_storage`` on
    :meth:`read`. Everything else is passed through to the wrapped storage.
    """

    def __init__(
        self,
        storage: StorageInterface,
        active_storage: StorageInterface,
        cache: Optional[DeletedCache] = None,
    ) -> None:
        self.storage = storage
        self.active_storage = active_storage
        self.cache = cache if cache is not None else DeletedCache()

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        """Read ``name``, raising ConsistencyViolation if hidden data was exported."""
        return self._read(name, verify=True)

    def read_raw(self, name: str) -> Optional[Dict[str, Any]]:
        """Read ``name`` without checking for hidden data in the sync storage."""
        return self._read(name, verify=False)

    def _read(self, name: str, verify: bool) -> Optional[Dict[str, Any]]:
        data = self.storage.read(name)
        if not isinstance(data, dict):
            return data
        document = split(data)
        if not document.has_spec:
            return data
        active = self.active_storage.read(name)
        payload = unhide(document.spec, document.payload, active, verify=verify, lax=document.lax, name=name)
        return rejoin(document, payload)

    def read_multiple(self, names: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        records: Dict[str, Dict[str, Any]] = {}
        for name in names:
            data = self.read(name)
            if data:
                records[name] = data
        return records

    def write(self, name: str, data: Dict[str, Any]) -> bool:
        # Any pending pre-delete snapshot is spent by this write, spec or not.
        cached = self.cache.consume(name)
        document = split(data)
        if not document.has_spec:
            return self.storage.write(name, data)
        prior = self._prior_payload(name, cached)
        payload = hide(document.spec, document.payload, prior, lax=document.lax)
        logger.debug(
            "deconfig.write.hidden",
            record=name,
            collection=self.get_collection_name(),
            lax=document.lax,
        )
        return self.storage.write(name, rejoin(document, payload))

    def _prior_payload(self, name: str, cached: Optional[Mapping]) -> Mapping:
        if cached is not None:
            logger.debug("deconfig.write.cache_hit", record=name)
            return cached
        existing = self.storage.read(name)
        if not isinstance(existing, dict):
            return {}
        return split(existing).payload

    def delete(self, name: str) -> bool:
        existing = self.storage.read(name)
        if isinstance(existing, dict):
            document = split(existing)
            if document.has_spec:
                self.cache.remember(name, document.payload)
                logger.debug("deconfig.delete.cached", record=name)
        return self.storage.delete(name)

    def delete_all(self, prefix: str = "") -> bool:
        success = True
        for name in self.list_all(prefix):
            if not self.delete(name):
                success = False
        return success

    def exists(self, name: str) -> bool:
        return self.storage.exists(name)

    def rename(self, name: str, new_name: str) -> bool:
        renamed = self.storage.rename(name, new_name)
        if renamed:
            cached = self.cache.consume(name)
            if cached is not None:
                self.cache.remember(new_name, cached)
        return renamed

    def encode(self, data: Any) -> bytes:
        return self.storage.encode(data)

    def decode(self, raw: bytes | str) -> Any:
        return self.storage.decode(raw)

    def list_all(self, prefix: str = "") -> List[str]:
        return self.storage.list_all(prefix)

    def create_collection(self, collection: str) -> "DeconfigStorage":
        return type(self)(
            self.storage.create_collection(collection),
            self.active_storage.create_collection(collection),
        )

    def get_all_collection_names(self) -> List[str]:
        return self.storage.get_all_collection_names()

    def get_collection_name(self) -> str:
        return self.storage.get_collection_name()


__all__ = ["DeconfigStorage"]
