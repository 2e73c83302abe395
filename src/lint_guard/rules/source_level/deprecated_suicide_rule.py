"""Flag calls to the deprecated ``suicide`` builtin."""


import re
from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from lint_guard.rules.helpers import iter_code_lines

_SUICIDE_CALL_RE = re.compile(r"\bsuicide\s*\(")


@dataclass
class DeprecatedSuicideRuleConfig(RuleConfig):
    """Config for the deprecated builtin check."""

    replacement: str = "selfdestruct"


class DeprecatedSuicideRule(Rule[DeprecatedSuicideRuleConfig]):
    """Suggest ``selfdestruct`` wherever ``suicide(...)`` is called."""

    name = "deprecated-suicide"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Suggest replacing deprecated 'suicide' for 'selfdestruct'.",
            type=RuleType.WARNING,
        ),
        fixable=True,
    )

    def example_violations(self) -> list[str]:
        """Return samples calling ``suicide``."""
        return ["function kill() { suicide(owner); }"]

    def example_non_violations(self) -> list[str]:
        """Return samples that only mention the word."""
        return [
            "function kill() { selfdestruct(owner); }",
            "// suicide(owner) was removed",
            'string s = "suicide(owner)";',
        ]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Search code outside comments and strings for ``suicide(``."""
        violations: list[Violation] = []
        for line_number, code in iter_code_lines(document.lines):
            for match in _SUICIDE_CALL_RE.finditer(code):
                violations.append(
                    self.violation(
                        line_number,
                        match.start(),
                        f"'suicide' is deprecated. Use '{self.config.replacement}' instead.",
                    )
                )
        return violations
