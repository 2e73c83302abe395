"""Lexical helpers shared by builtin rules."""


from collections.abc import Iterator
from dataclasses import dataclass

_QUOTE_CHARS = frozenset({'"', "'"})


@dataclass(frozen=True)
class StringLiteral:
    """A quoted literal found on a single line."""

    quote: str
    start: int
    end: int


def strip_line_ending(line: str) -> str:
    """Drop a trailing carriage return left by ``\\r\\n`` splitting."""
    return line[:-1] if line.endswith("\r") else line


def scan_line(line: str) -> tuple[list[StringLiteral], int | None]:
    """Return the string literals on ``line`` and the column of a ``//`` comment.

    Unterminated literals run to the end of the line. Block comments are not
    tracked here; rules that care about them skip those lines first.
    """
    literals: list[StringLiteral] = []
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "/" and line.startswith("//", index):
            return literals, index
        if char in _QUOTE_CHARS:
            start = index
            index += 1
            while index < length and line[index] != char:
                if line[index] == "\\":
                    index += 1
                index += 1
            literals.append(StringLiteral(quote=char, start=start, end=min(index, length)))
        index += 1
    return literals, None


def code_portion(line: str) -> str:
    """Return ``line`` with its trailing ``//`` comment and string contents blanked."""
    literals, comment_at = scan_line(line)
    chars = list(line if comment_at is None else line[:comment_at])
    for literal in literals:
        for position in range(literal.start + 1, min(literal.end, len(chars))):
            chars[position] = " "
    return "".join(chars)


def iter_code_lines(lines: tuple[str, ...]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, code)`` for lines outside ``/* ... */`` blocks.

    Line numbers are 1-based. Code has comments and string contents blanked.
    """
    in_block = False
    for line_number, raw in enumerate(lines, start=1):
        line = strip_line_ending(raw)
        if in_block:
            close = line.find("*/")
            if close < 0:
                continue
            line = " " * (close + 2) + line[close + 2 :]
            in_block = False
        code = code_portion(line)
        open_at = code.find("/*")
        while open_at >= 0:
            close = code.find("*/", open_at + 2)
            if close < 0:
                code = code[:open_at]
                in_block = True
                break
            code = code[:open_at] + " " * (close + 2 - open_at) + code[close + 2 :]
            open_at = code.find("/*")
        yield line_number, code
