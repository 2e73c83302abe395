"""Line-level rules."""

from .linebreak_style_rule import LinebreakStyleRule, LinebreakStyleRuleConfig
from .max_len_rule import MaxLenRule, MaxLenRuleConfig
from .no_trailing_whitespace_rule import (
    NoTrailingWhitespaceRule,
    NoTrailingWhitespaceRuleConfig,
)
from .quotes_rule import QuotesRule, QuotesRuleConfig

__all__ = [
    "LinebreakStyleRule",
    "LinebreakStyleRuleConfig",
    "MaxLenRule",
    "MaxLenRuleConfig",
    "NoTrailingWhitespaceRule",
    "NoTrailingWhitespaceRuleConfig",
    "QuotesRule",
    "QuotesRuleConfig",
]
