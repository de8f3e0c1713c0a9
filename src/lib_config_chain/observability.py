"""Structured logging helpers shared by the chain, its strategies, and the CLI.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing applications to adopt a specific logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.
    - ``configure_logging``: translate a verbosity name into a handler and level.

System Integration
    Strategies report misses and unavailable sources at debug level, the chain
    reports its outcome, and the CLI calls ``configure_logging`` with the
    verbosity it resolved through its own chain.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_config_chain_trace_id", default=None)
"""Current trace identifier propagated through logging helpers."""

TRACE: Final[int] = 5
"""Level below ``DEBUG`` used for the ``trace`` verbosity."""

VERBOSITY_LEVELS: Final[Mapping[str, int]] = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}
"""Verbosity names accepted by :func:`configure_logging`."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_config_chain")
_LOGGER.addHandler(logging.NullHandler())
logging.addLevelName(TRACE, "TRACE")

_CONSOLE_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s %(context)s"


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    strategy: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a lookup event.

    Why
        Keeps event construction consistent so downstream log processors can rely
        on stable keys.
    Inputs
        strategy: Name of the strategy being observed.
        path: File path or environment variable consulted, if any.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('env', 'APP_verbose', {'key': 'verbose'})
    {'strategy': 'env', 'path': 'APP_verbose', 'key': 'verbose'}
    """

    event: dict[str, Any] = {"strategy": strategy, "path": path}
    if payload:
        event |= dict(payload)
    return event


def configure_logging(verbosity: str | None) -> int:
    """Attach a console handler to the package logger at *verbosity*.

    Unknown or missing names fall back to ``info``. Repeated calls reuse the
    handler installed by the first call and only adjust the level.

    Returns
    -------
    int
        The :mod:`logging` level applied to the package logger.
    """

    level = VERBOSITY_LEVELS.get((verbosity or "").strip().lower(), logging.INFO)
    if not any(isinstance(handler, _ConsoleHandler) for handler in _LOGGER.handlers):
        handler = _ConsoleHandler()
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, defaults={"context": {}}))
        _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level)
    return level


class _ConsoleHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self) -> Any:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current trace identifier to the provided structured fields."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context
