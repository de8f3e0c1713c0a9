"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by loaders, strategies, and the composition
root. Most of these errors never reach consumers: strategies translate them
into "no value" so the chain can move on to the next source.

Contents
--------
* :class:`ConfigError` – umbrella base class for all library errors.
* :class:`NotFound` – a source file is missing or cannot be read.
* :class:`InvalidFormat` – a source file exists but cannot be decoded/parsed.
* :class:`InvalidChain` – a chain was composed from something that is not a
  source or strategy.

System Role
-----------
Loaders raise :class:`NotFound` and :class:`InvalidFormat`; the file
strategies catch exactly those. :class:`InvalidChain` is a programming error
and propagates to the caller of :func:`lib_config_chain.core.build_chain`.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_config_chain``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class NotFound(ConfigError):
    """Represents a missing or unreadable source (missing file, permission denied).

    Why
    ----
    Absence of configuration is an expected outcome; strategies treat this as
    a miss and let the chain continue.
    """


class InvalidFormat(ConfigError):
    """Raised when source content cannot be decoded or parsed.

    Typical Sources
    ---------------
    Structured document loaders (:mod:`json`, :mod:`tomllib`, :mod:`yaml`) and
    UTF-8 decoding of plain files.
    """


class InvalidChain(ConfigError):
    """Raised when a chain is composed from objects that cannot resolve keys."""
