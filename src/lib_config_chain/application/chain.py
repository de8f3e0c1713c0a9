"""Resolver chain: ordered, short-circuiting lookup over strategies.

Purpose
-------
Try each strategy in priority order and return the first answer. The chain
holds an immutable tuple of strategies instead of linking each strategy to
its successor, so traversal is a plain loop and cycles cannot be built.

Contents
--------
* :class:`BaseStrategy` – shared ``resolve`` implementation for adapters.
* :class:`ResolverChain` – the chain itself (also a strategy, so chains nest).
"""

from __future__ import annotations

from typing import ClassVar, Iterable

from ..domain.errors import InvalidChain
from ..domain.resolution import Resolution
from ..observability import log_debug, make_event
from .ports import Strategy


class BaseStrategy:
    """Derive ``resolve`` from ``resolve_with_origin`` for concrete strategies."""

    __slots__ = ()

    name: ClassVar[str] = "strategy"

    def resolve(self, key: str) -> str | None:
        """Return the value for *key* or ``None`` when this source has none."""

        found = self.resolve_with_origin(key)
        return None if found is None else found.value

    def resolve_with_origin(self, key: str) -> Resolution | None:  # pragma: no cover - abstract
        raise NotImplementedError


class ResolverChain(BaseStrategy):
    """Ordered collection of strategies queried until one answers.

    Why
    ----
    Precedence between configuration sources (argument over environment over
    file over default) is expressed by position alone.

    What
    ----
    Each :meth:`resolve` call performs exactly one traversal; nothing is
    cached. Strategies after one that always answers (a default) are never
    reached. An empty chain resolves nothing.

    Examples
    --------
    >>> from lib_config_chain.adapters.env.default import EnvironmentStrategy
    >>> from lib_config_chain.adapters.fallback.default import DefaultStrategy
    >>> chain = ResolverChain([EnvironmentStrategy(environ={}), DefaultStrategy("info")])
    >>> chain.resolve("verbose")
    'info'
    >>> ResolverChain([]).resolve("verbose") is None
    True
    """

    __slots__ = ("_strategies",)

    name: ClassVar[str] = "chain"

    def __init__(self, strategies: Iterable[Strategy]) -> None:
        collected = tuple(strategies)
        for strategy in collected:
            if not isinstance(strategy, Strategy):
                raise InvalidChain(f"Object {strategy!r} cannot resolve configuration keys")
        self._strategies = collected

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        """Strategies in priority order, highest first."""

        return self._strategies

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        return f"ResolverChain({list(self._strategies)!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        """Return the first strategy's answer for *key* together with its origin."""

        for position, strategy in enumerate(self._strategies):
            found = strategy.resolve_with_origin(key)
            if found is not None:
                log_debug(
                    "strategy_hit",
                    **make_event(found.source, found.path, {"key": key, "position": position}),
                )
                return found
            log_debug("strategy_miss", **make_event(strategy.name, None, {"key": key, "position": position}))
        log_debug("chain_exhausted", **make_event(self.name, None, {"key": key, "strategies": len(self._strategies)}))
        return None
