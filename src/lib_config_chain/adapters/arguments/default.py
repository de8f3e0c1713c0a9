"""Command-line argument adapter.

Purpose
-------
Answer lookups from values an external argument parser already produced
(``argparse``, ``click``). No parsing happens here.
"""

from __future__ import annotations

from argparse import Namespace
from types import MappingProxyType
from typing import ClassVar, Mapping

from ...application.chain import BaseStrategy
from ...domain.resolution import Resolution


class ArgumentStrategy(BaseStrategy):
    """Look up keys in a read-only view of parsed command-line values.

    ``None`` is how parsers report an option the user did not pass, so it
    counts as absent. Other non-string values are rendered with :func:`str`.

    Examples
    --------
    >>> strategy = ArgumentStrategy({"verbose": "debug", "input": None})
    >>> strategy.resolve("verbose")
    'debug'
    >>> strategy.resolve("input") is None
    True
    """

    __slots__ = ("_values",)

    name: ClassVar[str] = "arg"

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: Mapping[str, object] = MappingProxyType(dict(values or {}))

    @classmethod
    def from_namespace(cls, namespace: Namespace) -> ArgumentStrategy:
        """Build the strategy from an :class:`argparse.Namespace`."""

        return cls(vars(namespace))

    @property
    def values(self) -> Mapping[str, object]:
        """Read-only mapping of the parsed values."""

        return self._values

    def __repr__(self) -> str:
        return f"ArgumentStrategy(keys={sorted(self._values)!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        value = self._values.get(key)
        if value is None:
            return None
        return Resolution(key, value if isinstance(value, str) else str(value), self.name)
