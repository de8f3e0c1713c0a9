"""Resolution value object carrying the answer and its provenance.

Purpose
-------
Let tooling explain *which* source supplied a value, the same way layered
configuration tools report the origin of a merged key.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Resolution:
    """A resolved value together with the strategy that produced it.

    Attributes
    ----------
    key:
        Key that was requested.
    value:
        Text returned by the answering strategy.
    source:
        Strategy name (``"arg"``, ``"env"``, ``"file"``, ``"text"`` or
        ``"default"``).
    path:
        File path or environment variable name consulted, when applicable.

    Examples
    --------
    >>> Resolution("verbose", "debug", "env", "APP_verbose").as_dict()
    {'key': 'verbose', 'value': 'debug', 'source': 'env', 'path': 'APP_verbose'}
    """

    key: str
    value: str
    source: str
    path: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable dictionary representation."""

        return asdict(self)
