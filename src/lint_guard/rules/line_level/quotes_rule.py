"""Require string literals to use one quote style.

Example Rule Violations:
    - "string name = 'token';" under the default ``double`` style.

Example Non-Violations:
    - 'string name = "token";'
    - 'string s = "it\\'s";' (apostrophe inside a double-quoted literal)
"""


from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from lint_guard.rules.helpers import scan_line, strip_line_ending

_QUOTES = {"double": '"', "single": "'"}


@dataclass
class QuotesRuleConfig(RuleConfig):
    """Config selecting the required quote character."""

    style: str = "double"

    def __post_init__(self) -> None:
        if self.style not in _QUOTES:
            raise ValueError(
                f"quote style must be one of {', '.join(_QUOTES)}, got {self.style!r}"
            )


class QuotesRule(Rule[QuotesRuleConfig]):
    """Report string literals quoted with the wrong character."""

    name = "quotes"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Ensure that all strings use only one quote style.",
            type=RuleType.ERROR,
        ),
        fixable=True,
    )

    def example_violations(self) -> list[str]:
        """Return samples with single-quoted literals."""
        return ["string name = 'token';"]

    def example_non_violations(self) -> list[str]:
        """Return samples with double-quoted literals only."""
        return [
            'string name = "token";',
            "string s = \"it's\"; // don't flag 'comments'",
        ]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Scan each line's literals outside of line comments."""
        expected = _QUOTES[self.config.style]
        violations: list[Violation] = []
        for line_number, raw in enumerate(document.lines, start=1):
            literals, _ = scan_line(strip_line_ending(raw))
            for literal in literals:
                if literal.quote == expected:
                    continue
                violations.append(
                    self.violation(
                        line_number,
                        literal.start,
                        f"String literal must be quoted with {expected}, not {literal.quote}.",
                    )
                )
        return violations
