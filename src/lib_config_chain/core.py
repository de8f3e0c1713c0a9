"""Composition root for ``lib_config_chain``.

Purpose
-------
Turn an ordered list of source configurations into a
:class:`~lib_config_chain.application.chain.ResolverChain` and resolve keys
through it. This is the entry point external callers (a CLI dispatcher, an
application bootstrap) use after they have parsed their own arguments.

Contents
--------
* :data:`_STRATEGY_FACTORIES` – mapping of source types to strategy builders.
* :func:`build_chain` – build a chain from source configurations.
* :func:`resolve` – resolve one key, returning the value or ``None``.
* :func:`resolve_with_origin` – same, returning a :class:`Resolution`.

System Role
-----------
Connects the domain source descriptions with the adapters and emits the
outcome of every resolution through :mod:`lib_config_chain.observability`.
Adjust precedence by reordering the sources handed to :func:`build_chain`.
"""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

from .adapters.arguments.default import ArgumentStrategy
from .adapters.env.default import EnvironmentStrategy, default_env_prefix, environment_name
from .adapters.fallback.default import DefaultStrategy
from .adapters.files.default import PlainFileStrategy, StructuredFileStrategy
from .application.chain import ResolverChain
from .application.ports import Strategy
from .domain.errors import ConfigError, InvalidChain, InvalidFormat, NotFound
from .domain.resolution import Resolution
from .domain.sources import (
    SOURCE_KINDS,
    ArgumentSource,
    DefaultSource,
    EnvironmentSource,
    PlainFileSource,
    Source,
    StructuredFileSource,
)
from .observability import log_debug, log_info, make_event

# Strategy builders keyed by source type. Ready-made strategies (including
# nested chains) pass through build_chain untouched.
_STRATEGY_FACTORIES: Mapping[type, Callable[..., Strategy]] = {
    ArgumentSource: lambda source: ArgumentStrategy(source.values),
    EnvironmentSource: lambda source: EnvironmentStrategy(source.prefix),
    StructuredFileSource: lambda source: StructuredFileStrategy(source.path, format=source.format),
    PlainFileSource: lambda source: PlainFileStrategy(source.path),
    DefaultSource: lambda source: DefaultStrategy(source.value),
}


def build_chain(sources: Iterable[Source | Strategy]) -> ResolverChain:
    """Return a :class:`ResolverChain` querying *sources* in the given order.

    Why
    ----
    Callers describe their sources declaratively; precedence is the order of
    the iterable, highest first.

    Parameters
    ----------
    sources:
        Source configurations from :mod:`lib_config_chain.domain.sources`, or
        objects already implementing the strategy protocol.

    Raises
    ------
    InvalidChain
        If an element is neither a known source nor a strategy, or a
        structured source names an unsupported format.

    Examples
    --------
    >>> chain = build_chain([EnvironmentSource("NO_SUCH_PREFIX_"), DefaultSource("info")])
    >>> [strategy.name for strategy in chain.strategies]
    ['env', 'default']
    """

    strategies: list[Strategy] = []
    for source in sources:
        factory = _STRATEGY_FACTORIES.get(type(source))
        if factory is None:
            if isinstance(source, Strategy):
                strategies.append(source)
                continue
            raise InvalidChain(f"Unsupported configuration source: {source!r}")
        try:
            strategies.append(factory(source))
        except ValueError as exc:
            raise InvalidChain(f"Invalid configuration source {source!r}: {exc}") from exc
    _warn_unreachable(strategies)
    return ResolverChain(strategies)


def resolve(key: str, sources: Iterable[Source | Strategy]) -> str | None:
    """Resolve *key* through a chain built from *sources*.

    Returns ``None`` when no source supplies a value; that is a normal
    outcome the caller is expected to handle.

    Examples
    --------
    >>> resolve("verbose", [ArgumentSource({"verbose": "trace"}), DefaultSource("info")])
    'trace'
    >>> resolve("verbose", [ArgumentSource({})]) is None
    True
    """

    found = resolve_with_origin(key, sources)
    return None if found is None else found.value


def resolve_with_origin(key: str, sources: Iterable[Source | Strategy]) -> Resolution | None:
    """Resolve *key* and report which source answered.

    Side Effects
    ------------
    Emits ``configuration_resolved`` or ``configuration_missing`` events; the
    caller's bound trace identifier is left untouched.
    """

    chain = build_chain(sources)
    found = chain.resolve_with_origin(key)
    if found is None:
        log_info("configuration_missing", **make_event(chain.name, None, {"key": key, "strategies": len(chain)}))
        return None
    log_info("configuration_resolved", **make_event(found.source, found.path, {"key": key}))
    return found


def _warn_unreachable(strategies: list[Strategy]) -> None:
    """Log strategies that can never be reached because a default precedes them."""

    for position, strategy in enumerate(strategies[:-1]):
        if isinstance(strategy, DefaultStrategy):
            log_debug(
                "strategies_unreachable",
                **make_event(strategy.name, None, {"position": position, "skipped": len(strategies) - position - 1}),
            )
            return


__all__ = [
    "SOURCE_KINDS",
    "ArgumentSource",
    "ArgumentStrategy",
    "ConfigError",
    "DefaultSource",
    "DefaultStrategy",
    "EnvironmentSource",
    "EnvironmentStrategy",
    "InvalidChain",
    "InvalidFormat",
    "NotFound",
    "PlainFileSource",
    "PlainFileStrategy",
    "Resolution",
    "ResolverChain",
    "Source",
    "Strategy",
    "StructuredFileSource",
    "StructuredFileStrategy",
    "build_chain",
    "default_env_prefix",
    "environment_name",
    "resolve",
    "resolve_with_origin",
]
