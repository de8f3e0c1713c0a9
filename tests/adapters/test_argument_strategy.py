"""Argument strategy tests: pre-parsed values answer first, unset options fall through."""

from __future__ import annotations

import argparse

import pytest

from lib_config_chain.adapters.arguments.default import ArgumentStrategy


def test_retrieves_set_value() -> None:
    strategy = ArgumentStrategy({"example": "test_value"})
    assert strategy.resolve("example") == "test_value"


def test_returns_none_for_unset_value() -> None:
    strategy = ArgumentStrategy({"example": None})
    assert strategy.resolve("example") is None
    assert strategy.resolve("missing") is None


def test_empty_string_counts_as_supplied() -> None:
    assert ArgumentStrategy({"example": ""}).resolve("example") == ""


def test_numbers_render_as_text() -> None:
    assert ArgumentStrategy({"retries": 3}).resolve("retries") == "3"


def test_values_are_a_read_only_snapshot() -> None:
    """Mutating the caller's mapping after construction must not leak into lookups."""

    source = {"example": "before"}
    strategy = ArgumentStrategy(source)
    source["example"] = "after"
    assert strategy.resolve("example") == "before"
    with pytest.raises(TypeError):
        strategy.values["example"] = "changed"  # type: ignore[index]


def test_from_namespace_uses_parsed_arguments() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--example")
    parser.add_argument("--other")
    namespace = parser.parse_args(["--example", "test_value"])

    strategy = ArgumentStrategy.from_namespace(namespace)
    assert strategy.resolve("example") == "test_value"
    assert strategy.resolve("other") is None


def test_origin_names_the_argument_source() -> None:
    found = ArgumentStrategy({"example": "value"}).resolve_with_origin("example")
    assert found is not None
    assert (found.source, found.path) == ("arg", None)
