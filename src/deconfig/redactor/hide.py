"""Redaction engine applied before a record is written to the sync storage."""
from __future__ import annotations

import copy
from typing import Any, Optional

from ..models import Mapping, Node, SpecKey, is_mapping


def hide(spec: Node, payload: Mapping, prior: Optional[Mapping] = None, lax: bool = False) -> Mapping:
    """Return ``payload`` with every field named by ``spec`` removed or replaced.

    Strict leaves are dropped. Lax leaves (``lax`` set, or reached through an
    ``@``-prefixed key) take the value held in ``prior``, the payload currently in
    the sync storage, and are dropped only when ``prior`` has nothing for them.

    A non-mapping ``spec`` hides the whole record. Neither ``payload`` nor
    ``prior`` is modified.
    """

    prior = prior if is_mapping(prior) else {}
    if not is_mapping(spec):
        if lax and prior:
            return copy.deepcopy(prior)
        return {}
    if not is_mapping(payload):
        return payload

    result = dict(payload)
    for raw_key, child_spec in spec.items():
        key = SpecKey.parse(raw_key)
        _hide_key(result, key.name, child_spec, prior, lax or key.lax)
    return result


def _hide_key(result: Mapping, name: str, child_spec: Any, prior: Mapping, lax: bool) -> None:
    value = result.get(name)
    if is_mapping(child_spec):
        if value is None:
            if not lax:
                return
            value = {}
        elif not is_mapping(value):
            # Scalar under a nested hide specification is left alone.
            return
        hidden = hide(child_spec, value, _child(prior, name), lax)
        if hidden:
            result[name] = hidden
        else:
            result.pop(name, None)
        return

    if lax and prior.get(name) is not None:
        result[name] = copy.deepcopy(prior[name])
    else:
        result.pop(name, None)


def _child(parent: Mapping, name: str) -> Mapping:
    value = parent.get(name)
    return value if is_mapping(value) else {}


__all__ = ["hide"]
