"""Structured configuration file loaders.

Purpose
-------
Convert on-disk artifacts into document trees that the key search
understands. Loaders are small wrappers around ``json``/``tomllib``/
``yaml.safe_load`` so error handling and observability live in one place.

Contents
--------
* :class:`BaseFileLoader` – shared helper reading files as bytes.
* :class:`JSONFileLoader` – the default format.
* :class:`TOMLFileLoader` – TOML documents (always a table at the root).
* :class:`YAMLFileLoader` – YAML documents (a superset of JSON).
* :func:`loader_for` – pick a loader by explicit format or file suffix.

System Role
-----------
Used by :class:`lib_config_chain.adapters.files.default.StructuredFileStrategy`
on every lookup; nothing is cached. Unlike mapping-oriented loaders, any
document root is accepted (arrays and scalars included).
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Mapping

import yaml

from ...application.ports import DocumentLoader
from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Common utilities shared by the file loaders."""

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when it cannot be read.

        Why
        ----
        Missing files, directories, and permission problems all mean "this
        source has nothing to offer" to the chain.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b'{"key": 1}')
        >>> tmp.close()
        >>> BaseFileLoader()._read(tmp.name)[:4]
        b'{"ke'
        >>> Path(tmp.name).unlink()
        """

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Configuration file not found: {path}")
        try:
            payload = file_path.read_bytes()
        except OSError as exc:
            raise NotFound(f"Configuration file unreadable: {path}: {exc}") from exc
        log_debug("config_file_read", path=path, size=len(payload))
        return payload


class JSONFileLoader(BaseFileLoader):
    """Load JSON documents."""

    format = "json"

    def load(self, path: str) -> object:
        """Return the document parsed from the JSON file at *path*.

        Duplicate keys inside one object keep the last occurrence. The
        non-standard constants ``NaN``, ``Infinity`` and ``-Infinity`` and documents
        nested beyond the interpreter recursion limit are rejected as invalid.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', delete=False, encoding='utf-8')
        >>> _ = tmp.write('[{"enabled": true}]')
        >>> tmp.close()
        >>> JSONFileLoader().load(tmp.name)
        [{'enabled': True}]
        >>> Path(tmp.name).unlink()
        """

        try:
            data = json.loads(self._read(path), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            log_error("config_file_invalid", strategy="file", path=path, format="json", error=str(exc))
            raise InvalidFormat(f"Invalid JSON in {path}: {exc}") from exc
        return data


class TOMLFileLoader(BaseFileLoader):
    """Load TOML documents using the standard library parser."""

    format = "toml"

    def load(self, path: str) -> object:
        """Return the table parsed from the TOML file at *path*."""

        try:
            text = self._read(path).decode("utf-8")
            data = tomllib.loads(text)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError, RecursionError) as exc:
            log_error("config_file_invalid", strategy="file", path=path, format="toml", error=str(exc))
            raise InvalidFormat(f"Invalid TOML in {path}: {exc}") from exc
        return data


class YAMLFileLoader(BaseFileLoader):
    """Load YAML documents with ``yaml.safe_load``."""

    format = "yaml"

    def load(self, path: str) -> object:
        """Return the document parsed from the YAML file at *path*.

        An empty file yields ``None``, which contains no keys.
        """

        try:
            data = yaml.safe_load(self._read(path))
        except (yaml.YAMLError, RecursionError) as exc:
            log_error("config_file_invalid", strategy="file", path=path, format="yaml", error=str(exc))
            raise InvalidFormat(f"Invalid YAML in {path}: {exc}") from exc
        return data


_LOADERS: Mapping[str, DocumentLoader] = {
    "json": JSONFileLoader(),
    "toml": TOMLFileLoader(),
    "yaml": YAMLFileLoader(),
}

# Suffixes that select a non-JSON format; everything else is read as JSON.
_SUFFIX_FORMATS = {
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def infer_format(path: str) -> str:
    """Return the structured format implied by the suffix of *path*.

    Examples
    --------
    >>> infer_format('settings.YML'), infer_format('settings.toml'), infer_format('settings.conf')
    ('yaml', 'toml', 'json')
    """

    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "json")


def loader_for(path: str, format: str | None = None) -> DocumentLoader:
    """Return the loader for *format*, inferring it from *path* when omitted.

    Raises
    ------
    ValueError
        If *format* names an unsupported format.
    """

    name = (format or infer_format(path)).lower()
    try:
        return _LOADERS[name]
    except KeyError as exc:
        raise ValueError(f"Unsupported structured format {format!r}; expected one of {sorted(_LOADERS)}") from exc


def _reject_constant(name: str) -> object:
    """Refuse ``NaN``/``Infinity``/``-Infinity``, which strict JSON does not allow."""

    raise ValueError(f"Non-standard JSON constant {name}")
