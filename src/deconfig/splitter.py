"""Separate a configuration document into hide specification and payload."""
from __future__ import annotations

from typing import Any, Optional

from .models import LAX_MARKER, STRICT_MARKER, Mapping, Node, SplitDocument


def split(document: Mapping) -> SplitDocument:
    if not isinstance(document, dict):
        raise TypeError(f"Configuration document must be a mapping, got {type(document).__name__}")
    payload = dict(document)
    if STRICT_MARKER in payload:
        spec = payload.pop(STRICT_MARKER)
        # Both markers are mutually exclusive; a stray lax marker is dropped.
        payload.pop(LAX_MARKER, None)
        return SplitDocument(spec=spec, payload=payload, lax=False)
    if LAX_MARKER in payload:
        spec = payload.pop(LAX_MARKER)
        return SplitDocument(spec=spec, payload=payload, lax=True)
    return SplitDocument(spec=None, payload=payload, lax=False)


def join(spec: Optional[Node], payload: Any, lax: bool = False) -> Any:
    """Reattach ``spec`` under its marker key, placed first.

    Any spec other than ``None`` keeps its marker, even an empty one.
    """
    if spec is None:
        return payload
    marker = LAX_MARKER if lax else STRICT_MARKER
    document = {marker: spec}
    if isinstance(payload, dict):
        for key, value in payload.items():
            if key not in (STRICT_MARKER, LAX_MARKER):
                document[key] = value
    return document


def rejoin(split_document: SplitDocument, payload: Any) -> Any:
    return join(split_document.spec, payload, split_document.lax)


__all__ = ["split", "join", "rejoin"]
