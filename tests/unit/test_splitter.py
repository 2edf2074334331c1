import pytest

from deconfig.models import LAX_MARKER, STRICT_MARKER
from deconfig.splitter import join, split


def test_split_strict_marker():
    document = split({"_deconfig": {"key": "hidden"}, "key": "value", "other": 1})
    assert document.spec == {"key": "hidden"}
    assert document.payload == {"key": "value", "other": 1}
    assert document.lax is False
    assert document.marker == STRICT_MARKER


def test_split_lax_marker():
    document = split({"@_deconfig": "Hidden", "the_key": "value"})
    assert document.spec == "Hidden"
    assert document.payload == {"the_key": "value"}
    assert document.lax is True
    assert document.marker == LAX_MARKER


def test_split_without_marker():
    data = {"simple data": "beta"}
    document = split(data)
    assert document.spec is None
    assert not document.has_spec
    assert document.payload == data


def test_split_empty_spec_is_not_absent():
    document = split({"_deconfig": {}, "key": "value"})
    assert document.has_spec
    assert document.spec == {}


def test_split_does_not_mutate_input():
    data = {"_deconfig": "Hidden", "hidden": True}
    split(data)
    assert data == {"_deconfig": "Hidden", "hidden": True}


def test_split_rejects_non_mapping():
    with pytest.raises(TypeError):
        split(["test.config"])


def test_join_places_marker_first():
    document = join({"key": "hidden"}, {"a": 1, "b": 2})
    assert list(document) == ["_deconfig", "a", "b"]


def test_join_keeps_marker_spelling():
    assert join("Hidden", {"the_key": "value"}, lax=True) == {"@_deconfig": "Hidden", "the_key": "value"}


def test_join_without_spec_returns_payload():
    payload = {"a": 1}
    assert join(None, payload) is payload


@pytest.mark.parametrize("spec", [{}, ""])
def test_join_keeps_marker_for_empty_spec(spec):
    assert join(spec, {"a": 1}) == {"_deconfig": spec, "a": 1}
    assert list(join(spec, {"a": 1}, lax=True)) == ["@_deconfig", "a"]


def test_join_replaces_stale_marker_in_payload():
    document = join("Hidden", {"_deconfig": "Hidden", "hidden": True})
    assert document == {"_deconfig": "Hidden", "hidden": True}
    assert list(document) == ["_deconfig", "hidden"]
