"""Public package surface for ``lib_config_chain``.

Resolve a single configuration value by asking an ordered list of sources
(command-line arguments, environment, structured files, plain files, a
default) and keeping the first answer. See :mod:`lib_config_chain.core`.
"""

from __future__ import annotations

from .core import (
    SOURCE_KINDS,
    ArgumentSource,
    ArgumentStrategy,
    ConfigError,
    DefaultSource,
    DefaultStrategy,
    EnvironmentSource,
    EnvironmentStrategy,
    InvalidChain,
    InvalidFormat,
    NotFound,
    PlainFileSource,
    PlainFileStrategy,
    Resolution,
    ResolverChain,
    Source,
    Strategy,
    StructuredFileSource,
    StructuredFileStrategy,
    build_chain,
    default_env_prefix,
    environment_name,
    resolve,
    resolve_with_origin,
)
from .observability import bind_trace_id, configure_logging, get_logger

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
    "bind_trace_id",
    "build_chain",
    "configure_logging",
    "default_env_prefix",
    "environment_name",
    "get_logger",
    "resolve",
    "resolve_with_origin",
]
