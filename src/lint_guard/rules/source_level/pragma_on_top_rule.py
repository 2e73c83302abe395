"""Require the version pragma to be the first statement in a file.

Objective: The compiler version constraint should be visible before any
import or contract so readers and tooling see it immediately.

Example Rule Violations:
    - "import \\"./A.sol\\";\\npragma solidity ^0.4.0;"
      An import precedes the pragma.
    - "contract A {}"
      No pragma at all.

Example Non-Violations:
    - "// SPDX header\\npragma solidity ^0.4.0;\\ncontract A {}"
      Comments may precede the pragma.

Severity: Error; a misplaced pragma hides the supported compiler range.
"""


import re
from dataclasses import dataclass

from lint_guard.source import SourceDocument, Violation

from lint_guard.rules.base import Rule, RuleConfig, RuleDocs, RuleMeta, RuleType
from lint_guard.rules.helpers import iter_code_lines

_PRAGMA_RE = re.compile(r"^\s*pragma\s+solidity\b")


@dataclass
class PragmaOnTopRuleConfig(RuleConfig):
    """Config for pragma placement."""

    require_pragma: bool = True


class PragmaOnTopRule(Rule[PragmaOnTopRuleConfig]):
    """Report a missing or misplaced ``pragma solidity`` directive."""

    name = "pragma-on-top"
    meta = RuleMeta(
        docs=RuleDocs(
            description="Ensure a) A PRAGMA directive exists and b) its on top of the file.",
            type=RuleType.ERROR,
        )
    )

    def example_violations(self) -> list[str]:
        """Return samples with a missing or late pragma."""
        return [
            'import "./A.sol";\npragma solidity ^0.4.0;',
            "contract A {}",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples with the pragma first."""
        return [
            "// SPDX header\npragma solidity ^0.4.0;\ncontract A {}",
            "/* license\n   text */\npragma solidity ^0.4.0;",
        ]

    def verify(self, document: SourceDocument) -> list[Violation]:
        """Locate the first statement and the pragma, then compare them."""
        first_statement: int | None = None
        pragma_line: int | None = None
        for line_number, code in iter_code_lines(document.lines):
            if not code.strip():
                continue
            if first_statement is None:
                first_statement = line_number
            if _PRAGMA_RE.match(code):
                pragma_line = line_number
                break

        if pragma_line is None:
            if not self.config.require_pragma or first_statement is None:
                return []
            return [
                self.violation(1, 0, "No PRAGMA directive found at the top of file.")
            ]
        if pragma_line != first_statement:
            return [
                self.violation(
                    pragma_line,
                    0,
                    "PRAGMA directive must be the first statement in the file.",
                )
            ]
        return []
