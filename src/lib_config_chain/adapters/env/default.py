"""Environment variable adapter.

Purpose
-------
Answer lookups from the process environment. The variable consulted is the
configured prefix concatenated verbatim with the key, so prefix ``"FIXME_"``
and key ``"verbosity"`` read ``FIXME_verbosity``.

Key behaviours
--------------
* The live environment is read on every call; nothing is cached.
* An empty value counts as set.
* No case folding and no type coercion: values are returned as stored.
"""

from __future__ import annotations

import os
from typing import ClassVar, Mapping

from ...application.chain import BaseStrategy
from ...domain.resolution import Resolution


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Why
    ----
    Namespacing keeps unrelated environment variables from answering lookups.

    Examples
    --------
    >>> default_env_prefix('lib-config-chain')
    'LIB_CONFIG_CHAIN_'
    """

    return slug.replace("-", "_").upper() + "_"


def environment_name(prefix: str | None, key: str) -> str:
    """Return the environment variable name consulted for *key*.

    Examples
    --------
    >>> environment_name('FIXME_', 'verbosity')
    'FIXME_verbosity'
    >>> environment_name(None, 'HOME')
    'HOME'
    """

    return f"{prefix or ''}{key}"


class EnvironmentStrategy(BaseStrategy):
    """Look up ``prefix + key`` in the process environment."""

    __slots__ = ("_prefix", "_environ")

    name: ClassVar[str] = "env"

    def __init__(self, prefix: str | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the strategy.

        Parameters
        ----------
        prefix:
            Text prepended to every key. ``None`` means no prefix.
        environ:
            Mapping to read from. Defaults to :data:`os.environ`, read live at
            resolution time.
        """

        self._prefix = prefix or ""
        self._environ = environ if environ is not None else os.environ

    @property
    def prefix(self) -> str:
        return self._prefix

    def __repr__(self) -> str:
        return f"EnvironmentStrategy(prefix={self._prefix!r})"

    def resolve_with_origin(self, key: str) -> Resolution | None:
        """Return the variable named ``prefix + key`` if it is set.

        Examples
        --------
        >>> strategy = EnvironmentStrategy('DEMO_', environ={'DEMO_verbose': ''})
        >>> strategy.resolve('verbose')
        ''
        >>> strategy.resolve('missing') is None
        True
        """

        variable = environment_name(self._prefix, key)
        value = self._environ.get(variable)
        if value is None:
            return None
        return Resolution(key, value, self.name, variable)
