"""Whole-source rules."""

from .deprecated_suicide_rule import DeprecatedSuicideRule, DeprecatedSuicideRuleConfig
from .pragma_on_top_rule import PragmaOnTopRule, PragmaOnTopRuleConfig

__all__ = [
    "DeprecatedSuicideRule",
    "DeprecatedSuicideRuleConfig",
    "PragmaOnTopRule",
    "PragmaOnTopRuleConfig",
]
