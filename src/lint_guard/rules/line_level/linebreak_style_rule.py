"""Enforce a single line terminator style across a file.

Example Rule Violations:
    - "pragma solidity ^0.4.0;\\r\\n" under the default ``unix`` style.

Example Non-Violations:
    - "pragma solidity ^0.4.0;\\n" under the ``unix`` style.
"""


from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType

_STYLES = ("unix", "windows")


@dataclass
class LinebreakStyleRuleConfig(RuleConfig):
    """Config selecting the expected line terminator."""

    style: str = "unix"

    def __post_init__(self) -> None:
        if self.style not in _STYLES:
            raise ValueError(
                f"linebreak style must be one of {', '.join(_STYLES)}, got {self.style!r}"
            )


class LinebreakStyleRule(Rule[LinebreakStyleRuleConfig]):
    """Report line terminators that do not match the configured style."""

    name = "linebreak-style"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Enforce consistent LF or CRLF line endings.",
            type=RuleType.ERROR,
        ),
        fixable=True,
    )

    def example_violations(self) -> list[str]:
        """Return samples using CRLF terminators."""
        return ["pragma solidity ^0.4.0;\r\ncontract A {}\r\n"]

    def example_non_violations(self) -> list[str]:
        """Return samples using LF terminators."""
        return ["pragma solidity ^0.4.0;\ncontract A {}\n"]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Compare each terminated line against the expected style."""
        expect_crlf = self.config.style == "windows"
        violations: list[Violation] = []
        # The final element has no terminator after it.
        for line_number, line in enumerate(document.lines[:-1], start=1):
            has_crlf = line.endswith("\r")
            if has_crlf == expect_crlf:
                continue
            column = len(line) - 1 if has_crlf else len(line)
            message = (
                "Expected linebreaks to be 'CRLF' but found 'LF'."
                if expect_crlf
                else "Expected linebreaks to be 'LF' but found 'CRLF'."
            )
            violations.append(self.violation(line_number, column, message))
        return violations
