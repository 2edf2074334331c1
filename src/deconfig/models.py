"""Shared domain models used across deconfig."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

STRICT_MARKER = "_deconfig"
LAX_MARKER = "@_deconfig"
LAX_PREFIX = "@"

Scalar = Union[str, int, float, bool, None]
Node = Union[Scalar, List[Any], Dict[str, Any]]
Mapping = Dict[str, Any]


@dataclass(slots=True)
class SplitDocument:
    """A record separated into its hide specification and data payload.

    ``spec`` is ``None`` when the document carried no marker key at all, which is
    not the same thing as a marker whose value is an empty mapping.
    """

    spec: Optional[Node]
    payload: Mapping
    lax: bool = False

    @property
    def has_spec(self) -> bool:
        return self.spec is not None

    @property
    def marker(self) -> str:
        return LAX_MARKER if self.lax else STRICT_MARKER


@dataclass(slots=True, frozen=True)
class SpecKey:
    """A hide specification key with its lax prefix stripped."""

    name: str
    lax: bool = False

    @classmethod
    def parse(cls, raw: str) -> "SpecKey":
        if isinstance(raw, str) and raw.startswith(LAX_PREFIX):
            return cls(name=raw[len(LAX_PREFIX):], lax=True)
        return cls(name=raw, lax=False)


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_empty(value: Any) -> bool:
    """Loose emptiness: ``None``, ``False``, ``0``, ``""`` and empty containers."""
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, list, dict, tuple)):
        return len(value) == 0
    return False


def is_marker_only(value: Any) -> bool:
    """Return ``True`` for ``{}`` or a mapping holding nothing but a marker key."""
    if not is_mapping(value):
        return False
    return all(key in (STRICT_MARKER, LAX_MARKER) for key in value)


__all__ = [
    "STRICT_MARKER",
    "LAX_MARKER",
    "LAX_PREFIX",
    "Node",
    "Mapping",
    "Scalar",
    "SplitDocument",
    "SpecKey",
    "is_mapping",
    "is_empty",
    "is_marker_only",
]
