import pytest

from deconfig.redactor import hide


def test_hide_strict_leaf_removed():
    spec = {"key": {"something": "hidden"}}
    payload = {"key": {"something": "should be hidden", "other": "not hidden"}, "and": "not hidden"}
    assert hide(spec, payload, {}) == {"key": {"other": "not hidden"}, "and": "not hidden"}


def test_hide_lax_leaf_takes_prior_value():
    spec = {"key": {"@something": "hidden"}}
    payload = {"key": {"something": "this shouldnt be saved", "other": "not hidden"}}
    prior = {"key": {"something": "should not change", "other": "should be overwritten"}}
    assert hide(spec, payload, prior) == {"key": {"something": "should not change", "other": "not hidden"}}


def test_hide_lax_leaf_without_prior_is_removed():
    spec = {"@token": "hidden"}
    assert hide(spec, {"token": "secret", "name": "x"}, {}) == {"name": "x"}


def test_hide_lax_leaf_missing_from_payload_keeps_prior():
    spec = {"@token": "hidden"}
    assert hide(spec, {"name": "y"}, {"token": "V", "name": "x"}) == {"name": "y", "token": "V"}


def test_hide_strict_leaf_missing_from_payload_is_ignored():
    spec = {"token": "hidden"}
    assert hide(spec, {"name": "y"}, {"token": "V"}) == {"name": "y"}


def test_hide_prunes_emptied_parent():
    assert hide({"sub": {"key": "x"}}, {"sub": {"key": "v"}}, {}) == {}


def test_hide_keeps_scalar_where_spec_recurses():
    assert hide({"sub": {"key": "x"}}, {"sub": "scalar-value"}, {}) == {"sub": "scalar-value"}


def test_hide_leaf_spec_removes_whole_mapping():
    assert hide({"sub": "x"}, {"sub": {"a": 1}, "b": 2}, {}) == {"b": 2}


def test_hide_whole_record():
    assert hide("Hidden", {"a": 1}, {"a": 2}) == {}


def test_hide_whole_record_lax_keeps_prior():
    assert hide("Hidden", {"a": 1}, {"a": 2}, lax=True) == {"a": 2}


def test_hide_lax_root_flag_applies_to_all_keys():
    spec = {"a": "x", "b": {"c": "x"}}
    payload = {"a": 1, "b": {"c": 2, "d": 3}}
    prior = {"a": 10, "b": {"c": 20}}
    assert hide(spec, payload, prior, lax=True) == {"a": 10, "b": {"c": 20, "d": 3}}


@pytest.mark.parametrize(
    "spec",
    [
        {"@first": "x", "sub": {"key": "x"}},
        {"sub": {"key": "x"}, "@first": "x"},
    ],
)
def test_hide_lax_does_not_leak_to_siblings(spec):
    payload = {"first": "A", "sub": {"key": "B", "other": "C"}}
    prior = {"first": "P", "sub": {"key": "Q", "other": "R"}}
    assert hide(spec, payload, prior) == {"first": "P", "sub": {"other": "C"}}


def test_hide_does_not_touch_unnamed_keys():
    payload = {"keep": {"deep": [1, 2, 3]}, "drop": "secret"}
    hidden = hide({"drop": "x", "missing": {"deeper": "x"}}, payload, {})
    assert hidden == {"keep": {"deep": [1, 2, 3]}}


def test_hide_does_not_mutate_inputs():
    spec = {"sub": {"key": "x", "@lax": "x"}}
    payload = {"sub": {"key": "v", "lax": "new"}}
    prior = {"sub": {"lax": "old"}}
    hide(spec, payload, prior)
    assert payload == {"sub": {"key": "v", "lax": "new"}}
    assert prior == {"sub": {"lax": "old"}}


def test_hide_treats_none_as_absent():
    assert hide({"key": {"a": "x"}}, {"key": None}, {}) == {"key": None}
