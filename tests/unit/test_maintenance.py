from deconfig.maintenance import remove_hidden
from deconfig.storage import DeconfigStorage, MemoryStorage

SPEC = {"password": "hidden"}


def _leaked():
    return {"_deconfig": SPEC, "password": "leaked", "user": "admin"}


def _active():
    return {"_deconfig": SPEC, "password": "live", "user": "admin"}


def test_remove_hidden_repairs_all_collections():
    sync = MemoryStorage({"system.mail": _leaked(), "system.site": {"name": "site"}})
    sync.create_collection("language.fr").write("system.mail", _leaked())
    active = MemoryStorage({"system.mail": _active()})
    active.create_collection("language.fr").write("system.mail", _active())

    repaired = remove_hidden(DeconfigStorage(sync, active))

    assert repaired == ["system.mail", "language.fr:system.mail"]
    assert sync.read("system.mail") == {"_deconfig": SPEC, "user": "admin"}
    assert sync.create_collection("language.fr").read("system.mail") == {"_deconfig": SPEC, "user": "admin"}
    assert sync.read("system.site") == {"name": "site"}
    deconfig = DeconfigStorage(sync, active)
    assert deconfig.read("system.mail") == _active()


def test_remove_hidden_is_a_no_op_on_clean_storage():
    sync = MemoryStorage({"system.mail": {"_deconfig": SPEC, "user": "admin"}})
    assert remove_hidden(DeconfigStorage(sync, MemoryStorage())) == []
    assert sync.read("system.mail") == {"_deconfig": SPEC, "user": "admin"}


def test_remove_hidden_refuses_plain_storage():
    sync = MemoryStorage({"system.mail": _leaked()})
    assert remove_hidden(sync) == []
    assert sync.read("system.mail") == _leaked()
