"""Builtin rule catalog keyed by rule name."""


import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from .base import Rule, RuleConfig
from .line_level import (
    LinebreakStyleRule,
    MaxLenRule,
    NoTrailingWhitespaceRule,
    QuotesRule,
)
from .source_level import DeprecatedSuicideRule, PragmaOnTopRule

RuleClass: TypeAlias = type[Rule[RuleConfig]]
RuleCatalog: TypeAlias = Mapping[str, Rule[RuleConfig]]

CORE_RULE_TYPES: tuple[RuleClass, ...] = (
    DeprecatedSuicideRule,
    LinebreakStyleRule,
    MaxLenRule,
    NoTrailingWhitespaceRule,
    PragmaOnTopRule,
    QuotesRule,
)

_RULE_NAME_RE = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")


def build_catalog(rule_types: Iterable[RuleClass]) -> RuleCatalog:
    """Instantiate each rule with default config and index it by name.

    Raises:
        ValueError: If a rule name is malformed or registered twice.
    """
    catalog: dict[str, Rule[RuleConfig]] = {}
    for rule_type in rule_types:
        name = rule_type.name
        if not _RULE_NAME_RE.match(name):
            raise ValueError(f"Invalid core rule name '{name}' on {rule_type.__name__}")
        if name in catalog:
            raise ValueError(f"Duplicate core rule name '{name}'")
        catalog[name] = rule_type.from_dict({})
    return MappingProxyType(catalog)


CORE_RULES: RuleCatalog = build_catalog(CORE_RULE_TYPES)


def core_rule_names() -> list[str]:
    """Return builtin rule names in sorted order."""
    return sorted(CORE_RULES)
