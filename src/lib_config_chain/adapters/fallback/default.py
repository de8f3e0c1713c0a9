"""Terminal fallback adapter returning a fixed value."""

from __future__ import annotations

from typing import ClassVar

from ...application.chain import BaseStrategy
from ...domain.resolution import Resolution


class DefaultStrategy(BaseStrategy):
    """Return the configured value for every key.

    Examples
    --------
    >>> DefaultStrategy("info").resolve("anything")
    'info'
    """

    __slots__ = ("_value",)

    name: ClassVar[str] = "default"

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"DefaultStrategy({self._value!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        return Resolution(key, self._value, self.name)
