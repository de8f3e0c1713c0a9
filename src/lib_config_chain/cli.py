"""CLI adapter for ``lib_config_chain`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the resolver chain on the command line so operators can check which
source answers for a key without writing Python. The root command is itself
a client of the chain: its verbosity comes from ``--verbose``, then the
``LIB_CONFIG_CHAIN_verbose`` environment variable, then the ``--config``
file, then the built-in default.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling and logging verbosity.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_resolve` – resolves a key through a chain assembled from options.
* :func:`cli_env_name` – shows the environment variable consulted for a key.
* :func:`resolve_verbosity` – resolves the logging verbosity through a chain.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It turns options into source
configurations and calls the composition root; ``lib_cli_exit_tools``
centralises the exit code strategy.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import (
    SOURCE_KINDS,
    ArgumentSource,
    DefaultSource,
    EnvironmentSource,
    PlainFileSource,
    Source,
    StructuredFileSource,
    default_env_prefix,
    environment_name,
    resolve,
    resolve_with_origin,
)
from .observability import VERBOSITY_LEVELS, configure_logging

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

ENV_PREFIX: Final[str] = default_env_prefix("lib-config-chain")
DEFAULT_VERBOSITY: Final[str] = "warn"
VERBOSITY_KEY: Final[str] = "verbose"
FORMAT_CHOICES: Final[tuple[str, ...]] = ("json", "toml", "yaml")


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("lib_config_chain")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def resolve_verbosity(verbose: Optional[str], config_path: Optional[Path]) -> str:
    """Return the logging verbosity chosen by argument, environment, file, or default.

    Examples
    --------
    >>> resolve_verbosity("debug", None)
    'debug'
    """

    sources: list[Source] = [ArgumentSource({VERBOSITY_KEY: verbose}), EnvironmentSource(ENV_PREFIX)]
    if config_path is not None:
        sources.append(StructuredFileSource(str(config_path)))
    sources.append(DefaultSource(DEFAULT_VERBOSITY))
    return resolve(VERBOSITY_KEY, sources) or DEFAULT_VERBOSITY


@click.group(
    help="Resolve configuration values from an ordered chain of sources",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_config_chain",
    message="lib_config_chain version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "-v",
    "--verbose",
    default=None,
    metavar="LEVEL",
    help="Set the logging verbosity level.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Structured file consulted for the 'verbose' key",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, verbose: Optional[str], config_path: Optional[Path]) -> None:
    """Root command configuring traceback handling and logging for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color`` and sets the
        package logger level.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    verbosity = resolve_verbosity(verbose, config_path)
    if verbosity.strip().lower() not in VERBOSITY_LEVELS:
        click.echo(f"Unknown verbosity {verbosity!r}; using 'info'", err=True)
    ctx.obj["verbosity"] = verbosity
    configure_logging(verbosity)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_config_chain")
    except metadata.PackageNotFoundError:
        click.echo("lib_config_chain (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_config_chain')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.11')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("env-name", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--prefix", default=ENV_PREFIX, show_default=True, help="Prefix prepended to KEY")
def cli_env_name(key: str, prefix: str) -> None:
    """Print the environment variable consulted for *key*.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["env-name", "verbosity", "--prefix", "FIXME_"])
    >>> result.output.strip()
    'FIXME_verbosity'
    """

    click.echo(environment_name(prefix, key))


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--arg",
    "arguments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Pre-parsed argument value offered to the chain (repeatable)",
)
@click.option("--env-prefix", default="", help="Prefix prepended to KEY for the environment lookup")
@click.option("--env/--no-env", "use_env", default=True, show_default=True, help="Consult the environment")
@click.option(
    "--file",
    "files",
    multiple=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Structured file searched for KEY (repeatable)",
)
@click.option(
    "--format",
    "file_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Format of --file documents (inferred from the suffix when omitted)",
)
@click.option(
    "--text-file",
    "text_files",
    multiple=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Plain file whose whole content is the value (repeatable)",
)
@click.option("--default", "default", default=None, help="Fallback value when no source answers")
@click.option(
    "--order",
    default=",".join(SOURCE_KINDS),
    show_default=True,
    help="Comma separated source kinds, highest precedence first",
)
@click.option(
    "--provenance/--no-provenance",
    default=False,
    help="Print the value with the source that supplied it as JSON",
)
def cli_resolve(
    key: str,
    arguments: Sequence[str],
    env_prefix: str,
    use_env: bool,
    files: Sequence[Path],
    file_format: Optional[str],
    text_files: Sequence[Path],
    default: Optional[str],
    order: str,
    provenance: bool,
) -> None:
    """Resolve KEY through the configured sources and print the first answer.

    Exits with status 1 when no source supplies a value.
    """

    grouped: dict[str, list[Source]] = {
        "arg": [ArgumentSource(_parse_arguments(arguments))] if arguments else [],
        "env": [EnvironmentSource(env_prefix)] if use_env else [],
        "file": [StructuredFileSource(str(path), file_format.lower() if file_format else None) for path in files],
        "text": [PlainFileSource(str(path)) for path in text_files],
        "default": [DefaultSource(default)] if default is not None else [],
    }
    sources = [source for kind in _normalize_order(order) for source in grouped[kind]]

    found = resolve_with_origin(key, sources)
    if found is None:
        raise click.ClickException(f"No value found for key {key!r}")
    if provenance:
        click.echo(json.dumps(found.as_dict()))
        return
    click.echo(found.value, nl=not found.value.endswith("\n"))


def _parse_arguments(values: Sequence[str]) -> dict[str, str]:
    """Split ``NAME=VALUE`` pairs into a mapping; later duplicates win."""

    parsed: dict[str, str] = {}
    for item in values:
        name, separator, value = item.partition("=")
        if not separator or not name:
            raise click.BadParameter(f"Expected NAME=VALUE, got {item!r}", param_hint="--arg")
        parsed[name] = value
    return parsed


def _normalize_order(order: str) -> tuple[str, ...]:
    """Return the requested source kinds in order, dropping duplicates.

    Examples
    --------
    >>> _normalize_order("Env, arg,env")
    ('env', 'arg')
    """

    kinds: list[str] = []
    for raw in order.split(","):
        kind = raw.strip().lower()
        if not kind:
            continue
        if kind not in SOURCE_KINDS:
            raise click.BadParameter(
                f"Unknown source kind {kind!r}; expected some of: {', '.join(SOURCE_KINDS)}.",
                param_hint="--order",
            )
        if kind not in kinds:
            kinds.append(kind)
    return tuple(kinds)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_config_chain",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
