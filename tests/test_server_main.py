"""Tests for the ``lint-guard-mcp`` server and its tools."""

from __future__ import annotations

import json

from lint_guard import server
from lint_guard.rules import CORE_RULES


def test_main_runs_mcp_server(monkeypatch) -> None:
    """Server launch should hand control to the MCP runtime."""
    run_calls: list[bool] = []
    monkeypatch.setattr(server.mcp_server, "run", lambda: run_calls.append(True))

    server.main([])

    assert run_calls == [True]


def test_resolve_rules_defaults_to_full_core_ruleset() -> None:
    """An empty config resolves ``lintguard:all``."""
    payload = json.loads(server.resolve_rules(""))

    assert set(payload["rules"]) == set(CORE_RULES)
    assert payload["rules"]["quotes"] == {
        "severity": "error",
        "options": ["double"],
        "type": "error",
    }


def test_resolve_rules_reports_errors_as_payload() -> None:
    """Resolution failures are returned, not raised."""
    payload = json.loads(server.resolve_rules('{"extends": "lintguard:nope"}'))

    assert payload == {
        "error": '"lintguard:nope" is not a core ruleset.',
        "kind": "ConfigError",
    }


def test_resolve_rules_rejects_invalid_json() -> None:
    """Malformed JSON input produces an error payload."""
    payload = json.loads(server.resolve_rules("{oops"))

    assert payload["kind"] == "ConfigError"
    assert payload["error"].startswith("Invalid JSON")


def test_list_core_rules_describes_each_rule() -> None:
    """The catalog tool lists every builtin rule with its docs."""
    payload = json.loads(server.list_core_rules())

    assert sorted(payload) == sorted(CORE_RULES)
    assert payload["max-len"]["type"] == "warning"
