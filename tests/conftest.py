"""Shared fixtures for resolution tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from lint_guard.errors import ModuleAcquisitionError


class FakeResolver:
    """Module resolver backed by a dict, recording every acquisition."""

    def __init__(self, modules: dict[str, Any] | None = None) -> None:
        self.modules = dict(modules or {})
        self.calls: list[str] = []

    def acquire(self, specifier: str) -> object:
        self.calls.append(specifier)
        if specifier not in self.modules:
            raise ModuleNotFoundError(f"No module named '{specifier}'", name=specifier)
        value = self.modules[specifier]
        if isinstance(value, BaseException):
            raise ModuleAcquisitionError(specifier, value)
        return value


def make_plugin_rule(rule_type: str = "warning", description: str = "Plugin rule.") -> dict:
    """Build a mapping-shaped plugin rule definition."""
    return {"meta": {"docs": {"type": rule_type, "description": description}}}


def make_plugin(**rules: Any) -> SimpleNamespace:
    """Build a module-like plugin exposing ``rules``."""
    return SimpleNamespace(rules=dict(rules))


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()
