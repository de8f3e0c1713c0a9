"""End-to-end CLI coverage for the commands exposed by lib_config_chain."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

import lib_cli_exit_tools

from lib_config_chain import cli


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def _invoke(args: list[str], env: dict[str, str | None] | None = None):
    base: dict[str, str | None] = {"LIB_CONFIG_CHAIN_verbose": None}
    return _runner().invoke(cli.cli, args, env=base | (env or {}))


def test_resolve_prefers_arguments(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text('{"verbosity": "file"}', encoding="utf-8")
    result = _invoke(
        ["resolve", "verbosity", "--arg", "verbosity=arg", "--file", str(config), "--default", "default"],
    )
    assert result.exit_code == 0
    assert result.stdout == "arg\n"


def test_resolve_uses_environment_prefix() -> None:
    result = _invoke(
        ["resolve", "verbosity", "--env-prefix", "FIXME_", "--default", "info"],
        env={"FIXME_verbosity": "debug"},
    )
    assert result.exit_code == 0
    assert result.stdout == "debug\n"


def test_resolve_no_env_skips_environment() -> None:
    result = _invoke(
        ["resolve", "verbosity", "--env-prefix", "FIXME_", "--no-env", "--default", "info"],
        env={"FIXME_verbosity": "debug"},
    )
    assert result.stdout == "info\n"


def test_resolve_searches_nested_file(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text('{"a": {"key": "deep"}, "key": "shallow"}', encoding="utf-8")
    result = _invoke(["resolve", "key", "--no-env", "--file", str(config)])
    assert result.exit_code == 0
    assert result.stdout == "shallow\n"


def test_resolve_text_file_keeps_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "value.txt"
    path.write_text("test_content\n", encoding="utf-8")
    result = _invoke(["resolve", "anything", "--no-env", "--text-file", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "test_content\n"


def test_resolve_order_changes_precedence(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text('{"verbosity": "file"}', encoding="utf-8")
    result = _invoke(
        ["resolve", "verbosity", "--arg", "verbosity=arg", "--file", str(config), "--order", "file,arg"],
    )
    assert result.stdout == "file\n"


def test_resolve_provenance(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("logging:\n  verbosity: trace\n", encoding="utf-8")
    result = _invoke(["resolve", "verbosity", "--no-env", "--file", str(config), "--provenance"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "key": "verbosity",
        "value": "trace",
        "source": "file",
        "path": str(config),
    }


def test_resolve_without_value_fails(tmp_path: Path) -> None:
    result = _invoke(["resolve", "missing", "--no-env", "--file", str(tmp_path / "absent.json")])
    assert result.exit_code == 1
    assert "No value found for key 'missing'" in result.output


def test_resolve_rejects_malformed_argument() -> None:
    result = _invoke(["resolve", "key", "--arg", "no-separator"])
    assert result.exit_code == 2
    assert "NAME=VALUE" in result.output


def test_resolve_rejects_unknown_order() -> None:
    result = _invoke(["resolve", "key", "--order", "arg,registry"])
    assert result.exit_code == 2
    assert "registry" in result.output


def test_env_name() -> None:
    result = _invoke(["env-name", "verbosity", "--prefix", "FIXME_"])
    assert result.stdout.strip() == "FIXME_verbosity"
    result = _invoke(["env-name", "verbose"])
    assert result.stdout.strip() == "LIB_CONFIG_CHAIN_verbose"


def test_verbosity_resolved_through_chain(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("LIB_CONFIG_CHAIN_verbose", raising=False)
    config = tmp_path / "cli.json"
    config.write_text('{"verbose": "debug"}', encoding="utf-8")

    assert cli.resolve_verbosity("trace", config) == "trace"
    assert cli.resolve_verbosity(None, config) == "debug"
    assert cli.resolve_verbosity(None, tmp_path / "absent.json") == cli.DEFAULT_VERBOSITY


def test_verbosity_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIB_CONFIG_CHAIN_verbose", "error")
    assert cli.resolve_verbosity(None, None) == "error"


def test_unknown_verbosity_is_reported() -> None:
    result = _invoke(["--verbose", "chatty", "env-name", "key"])
    assert result.exit_code == 0
    assert "Unknown verbosity 'chatty'" in result.output


def test_cli_info_runs() -> None:
    result = _invoke(["info"])
    assert result.exit_code == 0
    assert "lib_config_chain" in result.output


def test_main_restores_traceback_flags(monkeypatch) -> None:
    monkeypatch.delenv("LIB_CONFIG_CHAIN_verbose", raising=False)
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    exit_code = cli.main(["--traceback", "env-name", "key"])
    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False
