"""Merge a linter config file into the set of active rule definitions.

The merge order is fixed: rules from the ``extends`` upstream first, then the
default configuration of every listed plugin, then the config's own ``rules``.
Rules whose final severity is ``off`` are dropped before loading.
"""


import json
import logging
import pprint
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import PLUGIN_PREFIX
from .errors import ConfigError, ModuleAcquisitionError, PluginLoadError, RuleLoadError
from .loader import PluginTable, RuleLoader, plugin_package_name
from .modules import DEFAULT_RESOLVER, ModuleResolver
from .plugins import resolve_plugin_config, rule_doc_type
from .rules import Rule
from .schema import RuleSpec, check_rule_specs, error_details, validate_rule_definition
from .upstream import resolve_upstream

DEFAULT_CONFIG_FILENAME = ".lintguardrc.json"

logger = logging.getLogger(__name__)


class Severity(StrEnum):
    """Normalized rule severity."""

    OFF = "off"
    WARNING = "warning"
    ERROR = "error"


_NUMERIC_SEVERITIES: dict[int, Severity] = {
    0: Severity.OFF,
    1: Severity.WARNING,
    2: Severity.ERROR,
}


def severity_of(spec: Any) -> Severity:
    """Return the severity of a rule spec such as ``"error"`` or ``[1, 120]``.

    Raises:
        ConfigError: If the spec does not start with a known severity.
    """
    value = spec[0] if isinstance(spec, (list, tuple)) and spec else spec
    if isinstance(value, int) and not isinstance(value, bool):
        if value in _NUMERIC_SEVERITIES:
            return _NUMERIC_SEVERITIES[value]
    elif isinstance(value, str):
        try:
            return Severity(value)
        except ValueError:
            pass
    raise ConfigError(f"Invalid rule severity {value!r}.")


def rule_options(spec: Any) -> list[Any]:
    """Return the options following the severity in a list-form spec."""
    if isinstance(spec, (list, tuple)):
        return list(spec[1:])
    return []


class LinterConfig(BaseModel):
    """User-facing configuration file contents."""

    model_config = ConfigDict(extra="forbid")

    extends: str | None = None
    plugins: list[str] = []
    rules: dict[str, RuleSpec] = {}

    @field_validator("rules")
    @classmethod
    def _validate_rule_specs(cls, rules: dict[str, Any]) -> dict[str, Any]:
        return check_rule_specs(rules)

    @field_validator("plugins")
    @classmethod
    def _validate_plugin_names(cls, plugins: list[str]) -> list[str]:
        for name in plugins:
            if not name or "/" in name:
                raise ValueError(f"invalid plugin name {name!r}")
            if name.startswith(PLUGIN_PREFIX):
                raise ValueError(
                    f"plugin {name!r} must be listed without the '{PLUGIN_PREFIX}' prefix"
                )
        return plugins


@dataclass(frozen=True)
class ResolvedConfig:
    """Active rule configs and their loaded definitions."""

    rules: dict[str, Any]
    definitions: dict[str, Any]
    plugins: dict[str, Any] = field(default_factory=dict)

    def severity(self, name: str) -> Severity:
        """Return the effective severity of an active rule."""
        return severity_of(self.rules[name])

    def to_payload(self) -> dict[str, object]:
        """Serialize active rules for CLI and tool output."""
        return {
            "rules": {
                name: {
                    "severity": str(self.severity(name)),
                    "options": rule_options(spec),
                    "type": str(rule_doc_type(self.definitions[name])),
                }
                for name, spec in sorted(self.rules.items())
            },
            "plugins": sorted(self.plugins),
        }


def parse_config(raw: Mapping[str, Any] | LinterConfig) -> LinterConfig:
    """Validate raw config data.

    Raises:
        ConfigError: If the data does not match the config schema.
    """
    if isinstance(raw, LinterConfig):
        return raw
    try:
        return LinterConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(
            "Invalid lint-guard configuration. Validation errors:\n"
            + pprint.pformat(list(error_details(exc)))
        ) from exc


def load_config_file(path: str | Path) -> LinterConfig:
    """Read and validate a JSON config file.

    Raises:
        ConfigError: If the file cannot be read or does not hold a valid config.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {config_path}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {config_path} on line {exc.lineno}: {exc.msg}"
        ) from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")
    return parse_config(payload)


def load_plugins(
    names: list[str], resolver: ModuleResolver | None = None
) -> dict[str, Any]:
    """Import each named plugin and key it by package name.

    Raises:
        PluginLoadError: If a plugin is not installed or fails to import.
    """
    active_resolver = DEFAULT_RESOLVER if resolver is None else resolver
    plugins: dict[str, Any] = {}
    for name in names:
        package_name = plugin_package_name(name)
        try:
            plugins[package_name] = active_resolver.acquire(package_name)
        except ModuleNotFoundError as exc:
            raise PluginLoadError(
                f'Unable to load Plugin "{package_name}". '
                f'Install it using "pip install {package_name}".'
            ) from exc
        except ModuleAcquisitionError as exc:
            raise PluginLoadError(
                f'Plugin "{package_name}" could not be loaded: {exc}'
            ) from exc
    return plugins


def _configure(name: str, definition: Any, spec: Any) -> Any:
    options = rule_options(spec)
    if not options or not isinstance(definition, Rule):
        return definition
    try:
        return definition.with_options(options)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f'Invalid options for rule "{name}": {exc}') from exc


def resolve_config(
    raw: Mapping[str, Any] | LinterConfig,
    *,
    resolver: ModuleResolver | None = None,
    loader: RuleLoader | None = None,
    plugins: PluginTable | None = None,
) -> ResolvedConfig:
    """Resolve a config into active rule specs and loaded definitions.

    Args:
        raw: Config mapping or an already parsed :class:`LinterConfig`.
        resolver: Module resolver for sharable configs and plugins.
        loader: Loader owning the registry definitions are bound into.
        plugins: Preloaded plugins keyed by package name. When given, plugins
            named in the config are looked up here instead of imported.
    """
    config = parse_config(raw)
    merged: dict[str, Any] = {}

    if config.extends is not None:
        merged.update(resolve_upstream(config.extends, resolver))

    if plugins is None:
        plugin_table = load_plugins(config.plugins, resolver)
    else:
        plugin_table = dict(plugins)
    for name in config.plugins:
        package_name = plugin_package_name(name)
        if package_name not in plugin_table:
            raise PluginLoadError(f'Unable to load Plugin "{package_name}".')
        merged.update(resolve_plugin_config(name, plugin_table[package_name]))

    merged.update(config.rules)

    enabled = {
        name: spec for name, spec in merged.items() if severity_of(spec) is not Severity.OFF
    }
    logger.debug("Resolved %d active rule(s) from %d configured", len(enabled), len(merged))

    active_loader = RuleLoader() if loader is None else loader
    registry = active_loader.load(list(enabled), plugin_table)

    definitions: dict[str, Any] = {}
    for name, spec in enabled.items():
        definition = registry[name]
        check = validate_rule_definition(definition)
        if not check.valid:
            raise RuleLoadError(
                f'Rule "{name}" has no valid definition:\n'
                + pprint.pformat(list(check.errors))
            )
        definitions[name] = _configure(name, definition, spec)

    return ResolvedConfig(rules=enabled, definitions=definitions, plugins=plugin_table)
