"""Builtin rule exports."""

from .base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from .registry import (
    CORE_RULE_TYPES,
    CORE_RULES,
    RuleCatalog,
    build_catalog,
    core_rule_names,
)

__all__ = [
    "CORE_RULES",
    "CORE_RULE_TYPES",
    "Rule",
    "RuleCatalog",
    "RuleConfig",
    "RuleDocs",
    "RuleMeta",
    "RuleType",
    "build_catalog",
    "core_rule_names",
]
