"""Public package interface for lint-guard."""

from .cli import cli_main
from .config import (
    LinterConfig,
    ResolvedConfig,
    Severity,
    load_config_file,
    resolve_config,
)
from .errors import ConfigError, LintGuardError, PluginLoadError, RuleLoadError
from .loader import RuleLoader, RuleRegistry
from .plugins import resolve_plugin_config
from .upstream import resolve_upstream

__all__ = [
    "ConfigError",
    "LintGuardError",
    "LinterConfig",
    "PluginLoadError",
    "ResolvedConfig",
    "RuleLoadError",
    "RuleLoader",
    "RuleRegistry",
    "Severity",
    "cli_main",
    "load_config_file",
    "resolve_config",
    "resolve_plugin_config",
    "resolve_upstream",
]
