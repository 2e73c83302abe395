"""Detect whitespace left at the end of a line.

Objective: Keep diffs clean by rejecting spaces or tabs that trail the last
visible character of a line.

Example Rule Violations:
    - "uint x = 1;   "
      Three spaces follow the statement terminator.
    - "contract A {\\t"
      A tab trails the opening brace.

Example Non-Violations:
    - "uint x = 1;"
      Line ends on its last token.

Severity: Warning; cosmetic, but noisy in review.
"""


from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from lint_guard.rules.helpers import strip_line_ending


@dataclass
class NoTrailingWhitespaceRuleConfig(RuleConfig):
    """Config for trailing whitespace detection."""

    skip_blank_lines: bool = False


class NoTrailingWhitespaceRule(Rule[NoTrailingWhitespaceRuleConfig]):
    """Report spaces and tabs after the last visible character of a line."""

    name = "no-trailing-whitespace"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Disallow trailing whitespace at the end of lines.",
            type=RuleType.WARNING,
        ),
        fixable=True,
    )

    def example_violations(self) -> list[str]:
        """Return samples with trailing whitespace."""
        return ["uint x = 1;   ", "contract A {\t\n}"]

    def example_non_violations(self) -> list[str]:
        """Return samples without trailing whitespace."""
        return ["uint x = 1;", "contract A {\n}\n"]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Flag each line whose content ends in a space or tab."""
        violations: list[Violation] = []
        for line_number, raw in enumerate(document.lines, start=1):
            line = strip_line_ending(raw)
            stripped = line.rstrip(" \t")
            if stripped == line:
                continue
            if not stripped and self.config.skip_blank_lines:
                continue
            violations.append(
                self.violation(
                    line_number,
                    len(stripped),
                    "Line contains trailing whitespace.",
                )
            )
        return violations
