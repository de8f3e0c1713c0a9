"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the resolver chain relies on so it can
orchestrate lookups without depending on concrete sources.

Contents
--------
* :class:`Strategy` – answers ``resolve(key)`` from one source (or a chain).
* :class:`DocumentLoader` – parses a structured file into a document tree.
* :class:`TextLoader` – reads a file's raw text.

System Role
-----------
Adapters implement these protocols; :class:`~lib_config_chain.application.chain.ResolverChain`
accepts any :class:`Strategy`, including another chain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.resolution import Resolution


@runtime_checkable
class Strategy(Protocol):
    """Resolve a key from a single source.

    Why
    ----
    The chain treats every source uniformly: a strategy either answers or
    returns ``None`` so the chain can try the next one. Strategies never raise
    for missing, unreadable, or malformed sources.
    """

    name: str

    def resolve(self, key: str) -> str | None:
        """Return the value for *key* or ``None`` when this source has none."""

    def resolve_with_origin(self, key: str) -> Resolution | None:
        """Return the value for *key* with provenance, or ``None``."""


class DocumentLoader(Protocol):
    """Parse a structured configuration file into a document tree.

    Why
    ----
    Keep format concerns (JSON/TOML/YAML) out of the search algorithm.
    """

    format: str

    def load(self, path: str) -> object:
        """Read *path* and return the parsed document or raise ``NotFound``/``InvalidFormat``."""


class TextLoader(Protocol):
    """Read a file's complete contents as text."""

    def load(self, path: str) -> str:
        """Return the contents of *path* verbatim or raise ``NotFound``/``InvalidFormat``."""
