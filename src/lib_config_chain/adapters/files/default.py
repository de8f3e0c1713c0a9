"""File-backed strategies.

Purpose
-------
Answer lookups from files on disk. Both strategies re-read their file on
every call and close it before returning. Missing, unreadable, or malformed
files are misses, never errors, so the chain can try the next source.

Contents
--------
* :class:`StructuredFileStrategy` – parses a JSON/TOML/YAML document and
  searches it recursively for the key.
* :class:`PlainFileStrategy` – returns the file's entire content, ignoring
  the key.
"""

from __future__ import annotations

from typing import ClassVar

from ...application.chain import BaseStrategy
from ...application.ports import TextLoader
from ...application.search import find_key
from ...domain.errors import InvalidFormat, NotFound
from ...domain.resolution import Resolution
from ...observability import log_debug, make_event
from ..file_loaders.plain import PlainFileLoader
from ..file_loaders.structured import loader_for


class StructuredFileStrategy(BaseStrategy):
    """Search a structured document for the first member named like the key.

    The search checks an object's own members before descending into its
    children, so ``{"a": {"key": "deep"}, "key": "shallow"}`` resolves
    ``"key"`` to ``"shallow"``. Non-string matches are rendered as compact
    JSON (``123``, ``true``, ``{"a":1}``).
    """

    __slots__ = ("_path", "_format", "_loader")

    name: ClassVar[str] = "file"

    def __init__(self, path: str, *, format: str | None = None) -> None:
        """Initialise the strategy.

        Parameters
        ----------
        path:
            Document location.
        format:
            ``"json"``, ``"toml"`` or ``"yaml"``; inferred from the suffix of
            *path* when omitted (JSON for unknown suffixes).

        Raises
        ------
        ValueError
            If *format* is not supported.
        """

        self._path = str(path)
        self._loader = loader_for(self._path, format)
        self._format = self._loader.format

    @property
    def path(self) -> str:
        return self._path

    @property
    def format(self) -> str:
        return self._format

    def __repr__(self) -> str:
        return f"StructuredFileStrategy({self._path!r}, format={self._format!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        try:
            document = self._loader.load(self._path)
            value = find_key(document, key)
        except (NotFound, InvalidFormat) as exc:
            log_debug("source_unavailable", **make_event(self.name, self._path, {"key": key, "error": str(exc)}))
            return None
        if value is None:
            return None
        return Resolution(key, value, self.name, self._path)


class PlainFileStrategy(BaseStrategy):
    """Return a text file's whole content, byte-for-byte, for any key."""

    __slots__ = ("_path",)

    name: ClassVar[str] = "text"

    _loader: ClassVar[TextLoader] = PlainFileLoader()

    def __init__(self, path: str) -> None:
        self._path = str(path)

    @property
    def path(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"PlainFileStrategy({self._path!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        try:
            content = self._loader.load(self._path)
        except (NotFound, InvalidFormat) as exc:
            log_debug("source_unavailable", **make_event(self.name, self._path, {"key": key, "error": str(exc)}))
            return None
        return Resolution(key, content, self.name, self._path)
