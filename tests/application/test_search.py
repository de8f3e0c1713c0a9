from __future__ import annotations

import json

from hypothesis import given
from hypothesis import strategies as st

from lib_config_chain.application.search import find_key, render_value


def test_direct_member_checked_before_children() -> None:
    document = {"a": {"key": "deep"}, "key": "shallow"}
    assert find_key(document, "key") == "shallow"


def test_array_root() -> None:
    assert find_key([{"key": "x"}], "key") == "x"


def test_array_elements_in_order() -> None:
    assert find_key([1, "key", {"other": 1}, {"key": "second"}, {"key": "third"}], "key") == "second"


def test_depth_first_before_later_siblings() -> None:
    document = {"first": [{"inner": {"key": "deep-first"}}], "second": {"key": "shallow-second"}}
    assert find_key(document, "key") == "deep-first"


def test_scalar_root_has_no_match() -> None:
    assert find_key("key", "key") is None
    assert find_key(42, "key") is None
    assert find_key(None, "key") is None


def test_null_value_is_a_match() -> None:
    assert find_key({"key": None, "nested": {"key": "later"}}, "key") == "null"


def test_render_value() -> None:
    assert render_value("as-is") == "as-is"
    assert render_value(123) == "123"
    assert render_value(-0.5) == "-0.5"
    assert render_value(False) == "false"
    assert render_value([1, "two"]) == '[1,"two"]'
    assert render_value({"ü": 1}) == '{"ü":1}'


JSON_SCALARS = st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=5))
JSON_TREES = st.recursive(
    JSON_SCALARS,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.sampled_from(["a", "b", "c"]), children, max_size=3),
    ),
    max_leaves=12,
)


@given(JSON_TREES)
def test_absent_key_never_matches(tree) -> None:
    assert find_key(tree, "key") is None


@given(JSON_TREES, JSON_SCALARS)
def test_root_member_always_wins(tree, value) -> None:
    document = {"child": tree, "key": value}
    expected = value if isinstance(value, str) else json.dumps(value)
    assert find_key(document, "key") == expected


def test_deep_nesting_does_not_exhaust_the_stack() -> None:
    node: object = {"key": "bottom"}
    for _ in range(100_000):
        node = [node]
    assert find_key(node, "key") == "bottom"
    assert find_key([node, {"key": "later"}], "other") is None


def test_self_referencing_containers_terminate() -> None:
    cyclic: list[object] = []
    cyclic.append(cyclic)
    assert find_key({"a": cyclic}, "key") is None
    cyclic.append({"key": "found"})
    assert find_key({"a": cyclic}, "key") == "found"


def test_shared_subtrees_are_searched_once_without_changing_order() -> None:
    shared = {"inner": 1}
    document = {"a": shared, "b": shared, "c": {"key": "after-shared"}}
    assert find_key(document, "key") == "after-shared"


def test_exponents_render_without_plus_or_leading_zeros() -> None:
    assert render_value(1e100) == "1e100"
    assert render_value(1e16) == "1e16"
    assert render_value(2.5e-8) == "2.5e-8"
    assert render_value({"small": [1e-5]}) == '{"small":[1e-5]}'


def test_exponent_like_strings_are_untouched() -> None:
    assert render_value(["1e+05", 'q"e+01']) == '["1e+05","q\\"e+01"]'
    assert render_value({"e+07": True}) == '{"e+07":true}'
