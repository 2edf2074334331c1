"""Directory-backed storage keeping one YAML file per record."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import regex
import structlog

from ..exceptions import StorageError
from ..utils.validation import resolve_and_check_path
from .base import StorageInterface
from .codec import decode_yaml, encode_yaml

logger = structlog.get_logger(__name__)

_NAME_PATTERN = regex.compile(r"^[\p{L}\p{N}_][\p{L}\p{N}_.\-]*$")
_SEGMENT_PATTERN = regex.compile(r"^[\p{L}\p{N}_]+$")
_COLLECTION_PATTERN = regex.compile(r"^[\p{L}\p{N}_]+(\.[\p{L}\p{N}_]+)*$")


class FileStorage(StorageInterface):
    """Records live at ``<root>/<name>.yml``.

    Named collections are sub-directories: collection ``language.fr`` is stored
    under ``<root>/language/fr``.
    """

    extension = ".yml"

    def __init__(self, root: Path | str, collection: str = StorageInterface.DEFAULT_COLLECTION) -> None:
        if collection and not _COLLECTION_PATTERN.match(collection):
            raise StorageError(f"Invalid collection name: {collection!r}")
        try:
            self.root = resolve_and_check_path(root)
        except ValueError as exc:
            raise StorageError(str(exc)) from exc
        self._collection = collection

    @property
    def directory(self) -> Path:
        if not self._collection:
            return self.root
        return self.root.joinpath(*self._collection.split("."))

    def _path(self, name: str) -> Path:
        if not _NAME_PATTERN.match(name):
            raise StorageError(f"Invalid record name: {name!r}")
        return self.directory / f"{name}{self.extension}"

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        path = self._path(name)
        if not path.is_file():
            return None
        try:
            data = self.decode(path.read_bytes())
        except StorageError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StorageError(f"Record {name!r} in {path} is not a mapping")
        return data

    def write(self, name: str, data: Dict[str, Any]) -> bool:
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.encode(data))
        logger.debug("storage.file.write", record=name, collection=self._collection)
        return True

    def delete(self, name: str) -> bool:
        path = self._path(name)
        if not path.is_file():
            return False
        path.unlink()
        return True

    def rename(self, name: str, new_name: str) -> bool:
        source = self._path(name)
        target = self._path(new_name)
        if not source.is_file():
            raise StorageError(f"Cannot rename missing record: {name}")
        source.replace(target)
        return True

    def encode(self, data: Any) -> bytes:
        return encode_yaml(data)

    def decode(self, raw: bytes | str) -> Any:
        return decode_yaml(raw)

    def list_all(self, prefix: str = "") -> List[str]:
        if not self.directory.is_dir():
            return []
        names = [
            path.name[: -len(self.extension)]
            for path in self.directory.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        ]
        return sorted(name for name in names if name.startswith(prefix))

    def create_collection(self, collection: str) -> "FileStorage":
        return FileStorage(self.root, collection)

    def get_all_collection_names(self) -> List[str]:
        if not self.root.is_dir():
            return []
        collections = set()
        for path in self.root.rglob(f"*{self.extension}"):
            parts = path.parent.relative_to(self.root).parts
            # Only directories that map back to the same place via create_collection.
            if path.is_file() and parts and all(_SEGMENT_PATTERN.match(part) for part in parts):
                collections.add(".".join(parts))
        return sorted(collections)

    def get_collection_name(self) -> str:
        return self._collection


__all__ = ["FileStorage"]
