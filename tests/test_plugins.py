"""Tests for plugin default configuration."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from conftest import make_plugin, make_plugin_rule
from lint_guard.loader import RuleLoader, split_rule_name
from lint_guard.plugins import resolve_plugin_config
from lint_guard.rules import CORE_RULES


def test_plugin_config_maps_qualified_names_to_docs_type() -> None:
    """Each plugin rule should appear under ``<name>/<rule>``."""
    plugin = {"rules": {"bar": {"meta": {"docs": {"type": "security"}}}}}

    assert resolve_plugin_config("foo", plugin) == {"foo/bar": "security"}


def test_plugin_config_accepts_module_and_rule_objects() -> None:
    """Attribute-shaped plugins and rule objects expose the same metadata."""
    plugin = SimpleNamespace(rules={"strict-quotes": CORE_RULES["quotes"]})

    assert resolve_plugin_config("style", plugin) == {"style/strict-quotes": "error"}


def test_plugin_config_returns_a_new_mapping_each_call() -> None:
    """Results are independent between calls."""
    plugin = make_plugin(a=make_plugin_rule("error"))

    first = resolve_plugin_config("p", plugin)
    first["p/extra"] = "warning"

    assert resolve_plugin_config("p", plugin) == {"p/a": "error"}


def test_plugin_config_propagates_missing_metadata() -> None:
    """Malformed plugin rules are not masked."""
    plugin = make_plugin(broken={"meta": {}})

    with pytest.raises(KeyError):
        resolve_plugin_config("p", plugin)


def test_plugin_config_names_are_accepted_by_loader() -> None:
    """Every produced name splits back into the plugin and its rule."""
    plugin = make_plugin(first=make_plugin_rule(), second=make_plugin_rule("error"))
    loader = RuleLoader()

    names = list(resolve_plugin_config("sec", plugin))
    registry = loader.load(names, {"lint-guard-plugin-sec": plugin})

    for name in names:
        assert split_rule_name(name) == ("sec", name.split("/")[1])
        assert registry[name] is plugin.rules[name.split("/")[1]]
