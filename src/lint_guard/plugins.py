"""Default rule configuration contributed by plugins."""


from collections.abc import Mapping
from typing import Any


def get_field(container: Any, key: str) -> Any:
    """Read ``key`` from a mapping or, failing that, as an attribute.

    Missing keys raise ``KeyError`` or ``AttributeError`` unchanged.
    """
    if isinstance(container, Mapping):
        return container[key]
    return getattr(container, key)


def rule_doc_type(definition: Any) -> Any:
    """Return ``definition.meta.docs.type`` for attribute or mapping shaped rules."""
    return get_field(get_field(get_field(definition, "meta"), "docs"), "type")


def resolve_plugin_config(name: str, plugin: Any) -> dict[str, Any]:
    """Build ``{"<name>/<rule>": docs type}`` for every rule a plugin exports.

    Args:
        name: Plugin name without the ``lint-guard-plugin-`` prefix.
        plugin: Loaded plugin exposing a ``rules`` table whose entries carry
            ``meta.docs.type``.
    """
    rules = get_field(plugin, "rules")
    config: dict[str, Any] = {}
    for rule_name in rules:
        config[f"{name}/{rule_name}"] = rule_doc_type(rules[rule_name])
    return config
