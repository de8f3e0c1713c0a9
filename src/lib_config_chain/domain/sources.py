"""Source configurations accepted by the composition root.

Purpose
-------
Describe *where* a value may come from without performing any lookup. Each
class is one tagged variant of the closed :data:`Source` union; the
composition root turns an ordered sequence of sources into a
:class:`~lib_config_chain.application.chain.ResolverChain`.

Contents
--------
* :class:`ArgumentSource` – already-parsed command-line values.
* :class:`EnvironmentSource` – process environment with an optional prefix.
* :class:`StructuredFileSource` – JSON/TOML/YAML document searched by key.
* :class:`PlainFileSource` – text file whose full content is the value.
* :class:`DefaultSource` – fixed fallback value.
* :data:`Source` – union of the variants above.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Union

StructuredFormat = Literal["json", "toml", "yaml"]


@dataclass(frozen=True, slots=True)
class ArgumentSource:
    """Named values produced by an external command-line parser.

    ``None`` values mark options the user did not supply and count as absent.

    Examples
    --------
    >>> ArgumentSource({"verbose": "debug"}).values["verbose"]
    'debug'
    """

    values: Mapping[str, object] = field(default_factory=dict)
    kind: Literal["arg"] = field(default="arg", init=False)


@dataclass(frozen=True, slots=True)
class EnvironmentSource:
    """Process environment, queried as ``prefix + key``."""

    prefix: str | None = None
    kind: Literal["env"] = field(default="env", init=False)


@dataclass(frozen=True, slots=True)
class StructuredFileSource:
    """Structured document searched recursively for the key.

    ``format`` is inferred from the file suffix when omitted (JSON otherwise).
    """

    path: str
    format: StructuredFormat | None = None
    kind: Literal["file"] = field(default="file", init=False)


@dataclass(frozen=True, slots=True)
class PlainFileSource:
    """Text file whose whole content is returned regardless of the key."""

    path: str
    kind: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True, slots=True)
class DefaultSource:
    """Terminal fallback returning ``value`` for every key."""

    value: str
    kind: Literal["default"] = field(default="default", init=False)


Source = Union[ArgumentSource, EnvironmentSource, StructuredFileSource, PlainFileSource, DefaultSource]
"""Closed set of source configurations understood by :func:`~lib_config_chain.core.build_chain`."""

SOURCE_KINDS: tuple[str, ...] = ("arg", "env", "file", "text", "default")
"""Conventional precedence of source kinds, highest first."""
