"""YAML encoding shared by the bundled storages."""
from __future__ import annotations

from typing import Any

import yaml

from ..exceptions import StorageError


def encode_yaml(data: Any) -> bytes:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")


def decode_yaml(raw: bytes | str) -> Any:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise StorageError(f"Malformed YAML: {exc}") from exc


__all__ = ["encode_yaml", "decode_yaml"]
