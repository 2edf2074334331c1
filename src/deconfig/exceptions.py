from __future__ import annotations


class DeconfigError(Exception):
    """Base exception for deconfig"""


class ConsistencyViolation(DeconfigError):
    """Raised when hidden configuration is found in the sync storage"""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        subject = f' in "{name}"' if name else ""
        super().__init__(
            f'Hidden config found in sync{subject}. Use "deconfig remove-hidden" to fix.'
        )


class StorageError(DeconfigError):
    """Raised when a bundled storage backend cannot read or write a record"""


class ConfigError(DeconfigError):
    """Raised when the configuration file is invalid"""


__all__ = [
    "DeconfigError",
    "ConsistencyViolation",
    "StorageError",
    "ConfigError",
]
