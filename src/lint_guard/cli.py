"""CLI entry point for inspecting resolved ``lint-guard`` rule configuration.

Usage examples::

    # Resolve ./.lintguardrc.json (or the lintguard:all ruleset if absent)
    lg

    # Resolve a specific config file
    lg -c path/to/.lintguardrc.json

    # Machine-readable JSON output
    lg -j

    # List builtin rules
    lg --list-core

    # Show debug logging for module acquisition
    lg --debug -c config.json
"""


import argparse
import json
import logging
import sys
from pathlib import Path

from .config import (
    DEFAULT_CONFIG_FILENAME,
    LinterConfig,
    ResolvedConfig,
    load_config_file,
    resolve_config,
)
from .constants import RULESET_ALL
from .errors import LintGuardError
from .rules import CORE_RULES
from .version import PACKAGE_VERSION

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_ERROR = 2

_SEVERITY_SYMBOLS: dict[str, str] = {
    "warning": "*",
    "error": "!",
}


def _format_rule_line(name: str, entry: dict) -> str:
    """Build a one-line summary for a single active rule."""
    severity = entry["severity"]
    sym = _SEVERITY_SYMBOLS.get(severity, "?")
    line = f"{name}: {severity} [{entry['type']}] {sym}"
    if entry["options"]:
        line += f"  options={json.dumps(entry['options'])}"
    return line


def _print_core_rules() -> None:
    """Print builtin rules with their docs metadata."""
    for name in sorted(CORE_RULES):
        docs = CORE_RULES[name].meta.docs
        print(f"{name} [{docs.type}] {docs.description}")


def _load_config(path: str | None) -> LinterConfig:
    """Load the config at ``path``, the default file, or the full core ruleset."""
    if path is not None:
        return load_config_file(path)
    default_path = Path(DEFAULT_CONFIG_FILENAME)
    if default_path.is_file():
        return load_config_file(default_path)
    return LinterConfig(extends=RULESET_ALL)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="lg",
        description="Resolve lint-guard rule configuration.",
        epilog=f"Reads {DEFAULT_CONFIG_FILENAME} from the working directory by default.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    p.add_argument(
        "-c", "--config",
        default=None,
        metavar="JSON",
        help=f"Path to a JSON config file. Defaults to ./{DEFAULT_CONFIG_FILENAME}.",
    )
    p.add_argument(
        "-j", "--json",
        action="store_true",
        default=False,
        help="Output resolved rules as JSON.",
    )
    p.add_argument(
        "--list-core",
        action="store_true",
        default=False,
        help="List builtin rules and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    return p


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def _emit(resolved: ResolvedConfig, as_json: bool) -> None:
    """Print resolved rules in the requested format."""
    payload = resolved.to_payload()
    if as_json:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return
    for name, entry in payload["rules"].items():
        print(_format_rule_line(name, entry))


def cli_main(argv: list[str] | None = None) -> int:
    """Entry point for the ``lg`` command.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Exit code suitable for ``sys.exit``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.list_core:
        _print_core_rules()
        return EXIT_OK

    try:
        resolved = resolve_config(_load_config(args.config))
    except LintGuardError as exc:
        print(f"lg: {exc}", file=sys.stderr)
        return EXIT_ERROR

    _emit(resolved, args.json)
    return EXIT_OK


def main() -> None:
    """Thin wrapper that calls ``sys.exit`` with the CLI return code."""
    sys.exit(cli_main())
