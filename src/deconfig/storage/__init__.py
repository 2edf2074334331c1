"""Storage package exports."""
from .base import StorageInterface
from .deconfig import DeconfigStorage
from .filesystem import FileStorage
from .memory import MemoryStorage

__all__ = ["StorageInterface", "DeconfigStorage", "FileStorage", "MemoryStorage"]
