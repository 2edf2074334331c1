"""Document storage contract shared by the sync, active and deconfig storages."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional


class StorageInterface(ABC):
    """Key/document storage holding configuration records by dotted name.

    ``read`` returns ``None`` for a missing record. Collections are named
    namespaces; the default collection is the empty string.
    """

    DEFAULT_COLLECTION = ""

    @abstractmethod
    def exists(self, name: str) -> bool: ...

    @abstractmethod
    def read(self, name: str) -> Optional[Dict[str, Any]]: ...

    def read_multiple(self, names: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        records: Dict[str, Dict[str, Any]] = {}
        for name in names:
            data = self.read(name)
            if data:
                records[name] = data
        return records

    @abstractmethod
    def write(self, name: str, data: Dict[str, Any]) -> bool: ...

    @abstractmethod
    def delete(self, name: str) -> bool: ...

    @abstractmethod
    def rename(self, name: str, new_name: str) -> bool: ...

    @abstractmethod
    def encode(self, data: Any) -> bytes: ...

    @abstractmethod
    def decode(self, raw: bytes | str) -> Any: ...

    @abstractmethod
    def list_all(self, prefix: str = "") -> List[str]: ...

    def delete_all(self, prefix: str = "") -> bool:
        success = True
        for name in self.list_all(prefix):
            if not self.delete(name):
                success = False
        return success

    @abstractmethod
    def create_collection(self, collection: str) -> "StorageInterface": ...

    @abstractmethod
    def get_all_collection_names(self) -> List[str]: ...

    @abstractmethod
    def get_collection_name(self) -> str: ...


__all__ = ["StorageInterface"]
