"""Key search over parsed structured documents.

Purpose
-------
Find the first occurrence of a key anywhere inside a JSON-like tree of
mappings, lists, and scalars, and render the matched value as text.

Search order
------------
Depth-first pre-order. A mapping checks its own members before descending
into any child, children are visited in insertion order, list elements first
to last, and the search stops at the first match. A shallow key therefore
wins over a deeper one even when the deeper one appears earlier in the
document.

The traversal uses an explicit stack and visits each container once, so
arbitrarily deep documents and self-referencing YAML anchors (``a: &x [*x]``)
terminate.

Duplicate keys inside one mapping never reach this module: the parsers keep
the last occurrence.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping

from ..domain.errors import InvalidFormat

_JSON_NATIVE = (Mapping, list, tuple, int, float, bool)

# JSON string literals are matched whole so only exponents outside strings change.
_EXPONENT = re.compile(r'"(?:\\.|[^"\\])*"|e\+?(-?)0*(?=\d)')


def find_key(node: object, key: str) -> str | None:
    """Return the rendered value of the first member named *key* below *node*.

    Raises
    ------
    InvalidFormat
        If the matched value is nested too deeply to render.

    Examples
    --------
    >>> find_key({"a": {"key": "deep"}, "key": "shallow"}, "key")
    'shallow'
    >>> find_key([{"key": 123}], "key")
    '123'
    >>> find_key({"a": [1, 2, 3]}, "key") is None
    True
    """

    stack: list[object] = [node]
    seen: set[int] = set()
    while stack:
        current = stack.pop()
        if isinstance(current, Mapping):
            if key in current:
                return render_value(current[key])
            children = list(current.values())
        elif isinstance(current, (list, tuple)):
            children = list(current)
        else:
            continue
        if id(current) in seen:
            continue
        seen.add(id(current))
        stack.extend(reversed(children))
    return None


def render_value(value: object) -> str:
    """Render a matched value as text.

    Strings are returned unchanged, JSON-native values use compact canonical
    JSON with exponents written without ``+`` or leading zeros, anything else
    (TOML dates and times) falls back to :func:`str`. Self-referencing values
    render with :func:`repr`-style ``[...]`` markers.

    Examples
    --------
    >>> render_value("debug"), render_value(3), render_value(1.5), render_value(True), render_value(None)
    ('debug', '3', '1.5', 'true', 'null')
    >>> render_value({"level": "info", "targets": [1, 2]})
    '{"level":"info","targets":[1,2]}'
    >>> render_value(1e100), render_value([2.5e-08])
    ('1e100', '[2.5e-8]')
    """

    if isinstance(value, str):
        return value
    if value is not None and not isinstance(value, _JSON_NATIVE):
        return str(value)
    try:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    except ValueError:
        return str(value)
    except RecursionError as exc:
        raise InvalidFormat("Matched value is nested too deeply to render") from exc
    return _EXPONENT.sub(_normalize_exponent, text)


def _normalize_exponent(match: re.Match[str]) -> str:
    """Rewrite ``e+100``/``e-07`` as ``e100``/``e-7``; leave string literals alone."""

    if match.group(0).startswith('"'):
        return match.group(0)
    return "e" + match.group(1)
