"""MCP server exposing rule configuration resolution as tools."""


import argparse
import json

from mcp.server.fastmcp import FastMCP

from .config import resolve_config
from .constants import RULESET_ALL
from .errors import LintGuardError
from .rules import CORE_RULES
from .version import PACKAGE_VERSION

MCP_SERVER_NAME = "lint-guard"
mcp_server = FastMCP(MCP_SERVER_NAME)


def _resolve(config: dict) -> dict:
    """Resolve a config mapping into a tool-safe payload."""
    try:
        return resolve_config(config).to_payload()
    except LintGuardError as exc:
        return {"error": str(exc), "kind": type(exc).__name__}


@mcp_server.tool()
def resolve_rules(config_json: str = "") -> str:
    """Resolve a lint-guard config into its active rules.

    Accepts the JSON text of a ``.lintguardrc.json`` file. An empty string
    resolves the builtin ``lintguard:all`` ruleset. Returns a JSON object with
    each active rule's severity, options and type, or an ``error`` entry.
    """
    if not config_json.strip():
        config: object = {"extends": RULESET_ALL}
    else:
        try:
            config = json.loads(config_json)
        except json.JSONDecodeError as exc:
            return json.dumps({"error": f"Invalid JSON: {exc.msg}", "kind": "ConfigError"})
    if not isinstance(config, dict):
        return json.dumps({"error": "Config must be a JSON object", "kind": "ConfigError"})
    return json.dumps(_resolve(config), indent=2)


@mcp_server.tool()
def list_core_rules() -> str:
    """List builtin rules with their type and description."""
    payload = {
        name: {
            "type": str(rule.meta.docs.type),
            "description": rule.meta.docs.description,
            "recommended": rule.meta.docs.recommended,
        }
        for name, rule in sorted(CORE_RULES.items())
    }
    return json.dumps(payload, indent=2)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the MCP server CLI parser."""
    parser = argparse.ArgumentParser(
        prog="lint-guard-mcp",
        description="Run the lint-guard MCP server on stdio.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the lint-guard MCP server on stdio."""
    parser = _build_parser()
    parser.parse_args(argv)
    mcp_server.run()
