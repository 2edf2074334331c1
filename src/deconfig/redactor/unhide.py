"""Restoration engine applied when a record is read back from the sync storage."""
from __future__ import annotations

import copy
from typing import Any, Optional

from ..exceptions import ConsistencyViolation
from ..models import Mapping, Node, SpecKey, is_empty, is_mapping, is_marker_only


def unhide(
    spec: Node,
    payload: Mapping,
    active: Optional[Mapping] = None,
    verify: bool = False,
    lax: bool = False,
    name: Optional[str] = None,
) -> Any:
    """Fill the fields named by ``spec`` from ``active``.

    With ``verify`` set, a strict field that still holds a value in ``payload``
    raises :class:`ConsistencyViolation` for record ``name``: the secret was
    exported without being redacted. Lax fields are never checked and keep their
    exported value when ``active`` has none.
    """

    if not is_mapping(spec):
        if verify and not lax and not is_empty(payload) and not is_marker_only(payload):
            raise ConsistencyViolation(name)
        if lax and (active is None or is_marker_only(active)):
            return payload
        return copy.deepcopy(active) if active is not None else {}

    active = active if is_mapping(active) else {}
    if not is_mapping(payload):
        return payload

    result = dict(payload)
    for raw_key, child_spec in spec.items():
        key = SpecKey.parse(raw_key)
        _unhide_key(result, key.name, child_spec, active, verify, lax or key.lax, name)
    return result


def _unhide_key(
    result: Mapping,
    key: str,
    child_spec: Any,
    active: Mapping,
    verify: bool,
    lax: bool,
    name: Optional[str],
) -> None:
    if is_mapping(child_spec):
        existed = key in result
        value = result.get(key)
        if value is None:
            value = {}
        elif not is_mapping(value):
            return
        sub_active = active.get(key)
        restored = unhide(
            child_spec,
            value,
            sub_active if is_mapping(sub_active) else {},
            verify=verify,
            lax=lax,
            name=name,
        )
        if is_empty(restored) and (not lax or not existed):
            result.pop(key, None)
        else:
            result[key] = restored
        return

    if verify and not lax and not is_empty(result.get(key)):
        raise ConsistencyViolation(name)
    if active.get(key) is not None:
        result[key] = copy.deepcopy(active[key])


__all__ = ["unhide"]
