from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from deconfig.storage import DeconfigStorage, MemoryStorage

NAME = "test.key"


def _storages(sync: Optional[Dict[str, Any]], active: Optional[Dict[str, Any]] = None):
    sync_storage = MemoryStorage({NAME: sync} if sync is not None else None)
    active_storage = MemoryStorage({NAME: active} if active is not None else None)
    return sync_storage, active_storage, DeconfigStorage(sync_storage, active_storage)


@pytest.fixture
def make_storages():
    return _storages
