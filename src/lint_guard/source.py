"""Source views and violation records shared by builtin rules."""


from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """Canonical violation record emitted by a rule."""

    rule: str
    line: int
    column: int
    message: str


@dataclass(frozen=True)
class SourceDocument:
    """Precomputed views of a source file consumed by rules."""

    text: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "SourceDocument":
        """Build a document split on ``\\n`` so line terminators stay visible."""
        return cls(text=text, lines=tuple(text.split("\n")))
