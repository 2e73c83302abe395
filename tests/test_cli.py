"""Tests for ``lg`` CLI argument and output behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lint_guard import cli
from lint_guard.rules import CORE_RULES
from lint_guard.version import PACKAGE_VERSION


def test_version_flag_prints_package_version(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``--version`` should print package version and exit cleanly."""
    with pytest.raises(SystemExit) as raised:
        cli.cli_main(["--version"])

    assert raised.value.code == cli.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out.strip() == PACKAGE_VERSION
    assert captured.err == ""


def test_defaults_to_full_core_ruleset_without_config_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """With no config file present every builtin rule is listed."""
    monkeypatch.chdir(tmp_path)

    exit_code = cli.cli_main([])
    captured = capsys.readouterr()

    assert exit_code == cli.EXIT_OK
    lines = captured.out.strip().splitlines()
    assert len(lines) == len(CORE_RULES)
    assert 'quotes: error [error] !  options=["double"]' in lines


def test_reads_default_config_file_from_working_directory(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``.lintguardrc.json`` in the working directory is picked up."""
    (tmp_path / ".lintguardrc.json").write_text(
        json.dumps({"rules": {"max-len": ["warning", 120]}}), encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    exit_code = cli.cli_main(["-j"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == cli.EXIT_OK
    assert payload == {
        "rules": {
            "max-len": {"severity": "warning", "options": [120], "type": "warning"}
        },
        "plugins": [],
    }


def test_resolution_errors_exit_with_error_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """User-facing failures print a one-line message to stderr."""
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"extends": "lintguard:nope"}), encoding="utf-8")

    exit_code = cli.cli_main(["-c", str(config)])
    captured = capsys.readouterr()

    assert exit_code == cli.EXIT_ERROR
    assert captured.out == ""
    assert captured.err == 'lg: "lintguard:nope" is not a core ruleset.\n'


def test_list_core_prints_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    """``--list-core`` prints one line per builtin rule."""
    exit_code = cli.cli_main(["--list-core"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == cli.EXIT_OK
    assert [line.split(" ")[0] for line in lines] == sorted(CORE_RULES)
