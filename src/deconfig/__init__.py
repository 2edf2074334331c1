"""Hide configuration fields from exported configuration storage."""
from .cache import DeletedCache
from .exceptions import ConsistencyViolation, DeconfigError, StorageError
from .maintenance import remove_hidden
from .redactor import hide, unhide
from .splitter import join, split
from .storage import DeconfigStorage, FileStorage, MemoryStorage, StorageInterface
from .version import __version__

__all__ = [
    "ConsistencyViolation",
    "DeconfigError",
    "DeconfigStorage",
    "DeletedCache",
    "FileStorage",
    "MemoryStorage",
    "StorageError",
    "StorageInterface",
    "hide",
    "join",
    "remove_hidden",
    "split",
    "unhide",
    "__version__",
]
