"""Detect lines longer than a configured limit.

Example Rule Violations:
    - A 200 character ``require`` call on a single line.

Example Non-Violations:
    - The same call wrapped across several lines.
"""


from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from lint_guard.rules.helpers import strip_line_ending


@dataclass
class MaxLenRuleConfig(RuleConfig):
    """Config for the maximum line length check."""

    max_length: int = 145


class MaxLenRule(Rule[MaxLenRuleConfig]):
    """Report lines whose length exceeds ``max_length`` characters."""

    name = "max-len"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Ensure that all lines stay within a maximum length.",
            type=RuleType.WARNING,
        )
    )

    def example_violations(self) -> list[str]:
        """Return samples with an overlong line."""
        return ["require(" + "x" * 150 + ");"]

    def example_non_violations(self) -> list[str]:
        """Return samples within the length limit."""
        return ["require(x > 0);", ""]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Flag lines longer than the configured limit."""
        limit = self.config.max_length
        violations: list[Violation] = []
        for line_number, raw in enumerate(document.lines, start=1):
            line = strip_line_ending(raw)
            if len(line) > limit:
                violations.append(
                    self.violation(
                        line_number,
                        limit,
                        f"Line exceeds the limit of {limit} characters ({len(line)}).",
                    )
                )
        return violations
