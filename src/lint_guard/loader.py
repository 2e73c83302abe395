"""Resolve rule names into loaded rule definitions."""


import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, TypeAlias

from .constants import CORE_RULES_DIRPATH, PLUGIN_PREFIX
from .errors import PluginLoadError, RuleLoadError
from .plugins import get_field
from .rules import CORE_RULES, RuleCatalog

PluginTable: TypeAlias = Mapping[str, Any]

logger = logging.getLogger(__name__)


def split_rule_name(name: str) -> tuple[str, str] | None:
    """Split ``"<plugin>/<rule>"`` into its parts, or return ``None`` for core names."""
    if "/" not in name:
        return None
    prefix, rule_name = name.split("/", 1)
    return prefix, rule_name


def plugin_package_name(prefix: str) -> str:
    """Return the package name a plugin namespace is published under."""
    return PLUGIN_PREFIX + prefix


def core_rule_path(name: str) -> str:
    """Return the location a core rule is reported under in load errors."""
    return f"{CORE_RULES_DIRPATH}/{name}"


class RuleRegistry(MutableMapping[str, Any]):
    """Mutable mapping of rule name to loaded rule definition.

    A registry is seeded with every rule in ``catalog`` on construction and
    grows as plugin rules are resolved into it.
    """

    def __init__(self, catalog: RuleCatalog | None = None, *, seed: bool = True) -> None:
        self.catalog: RuleCatalog = CORE_RULES if catalog is None else catalog
        self._definitions: dict[str, Any] = dict(self.catalog) if seed else {}

    def __getitem__(self, name: str) -> Any:
        return self._definitions[name]

    def __setitem__(self, name: str, definition: Any) -> None:
        self._definitions[name] = definition

    def __delitem__(self, name: str) -> None:
        del self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._definitions)!r})"


class RuleLoader:
    """Bind core and plugin rule names into a :class:`RuleRegistry`."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = RuleRegistry() if registry is None else registry

    def load(
        self, list_of_rules: Iterable[str], plugins: PluginTable
    ) -> RuleRegistry:
        """Resolve each rule name and bind it into the registry.

        Names are processed in order. The first failure aborts the batch and
        nothing from the batch is written to the registry. A later binding for
        a name overwrites an earlier one.

        Args:
            list_of_rules: Core rule names and ``"<plugin>/<rule>"`` names.
            plugins: Loaded plugins keyed by package name, for example
                ``{"lint-guard-plugin-security": module}``.

        Raises:
            PluginLoadError: If a qualified name refers to a plugin that is not
                in ``plugins``.
            RuleLoadError: If a bare name is not a builtin rule.
        """
        resolved: dict[str, Any] = {}
        for name in list_of_rules:
            parts = split_rule_name(name)
            if parts is not None:
                resolved[name] = self._resolve_plugin_rule(parts, plugins)
            else:
                resolved[name] = self._resolve_core_rule(name)

        self.registry.update(resolved)
        logger.debug("Bound %d rule(s) into registry", len(resolved))
        return self.registry

    def _resolve_plugin_rule(self, parts: tuple[str, str], plugins: PluginTable) -> Any:
        prefix, rule_name = parts
        package_name = plugin_package_name(prefix)
        try:
            plugin = plugins[package_name]
        except KeyError as exc:
            raise PluginLoadError(f'Unable to load Plugin "{package_name}".') from exc

        # Shape checks happen when the rule is inspected before execution.
        return get_field(plugin, "rules").get(rule_name)

    def _resolve_core_rule(self, name: str) -> Any:
        try:
            return self.registry.catalog[name]
        except KeyError as exc:
            raise RuleLoadError(f"Unable to read {core_rule_path(name)}") from exc
