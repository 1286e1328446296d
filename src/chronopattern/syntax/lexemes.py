"""Lexeme types produced by the pattern tokenizer.

A pattern is a stream of two kinds of lexemes:
- TokenLexeme: one pattern letter repeated ``count`` times, e.g. "yyyy"
- BlobLexeme: literal text emitted verbatim, quotes already removed

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["BlobLexeme", "Lexeme", "TokenLexeme"]


@dataclass(frozen=True, slots=True)
class TokenLexeme:
    """A run of one repeated pattern letter.

    Attributes:
        token: The pattern letter (a single ASCII letter)
        count: Number of consecutive repetitions (>= 1)
    """

    token: str
    count: int = 1

    def __post_init__(self) -> None:
        """Validate TokenLexeme invariants.

        Raises:
            ValueError: If token is not a single ASCII letter or count < 1.
        """
        if len(self.token) != 1 or not (self.token.isascii() and self.token.isalpha()):
            msg = f"TokenLexeme.token must be a single ASCII letter, got {self.token!r}"
            raise ValueError(msg)
        if self.count < 1:
            msg = f"TokenLexeme.count must be >= 1, got {self.count}"
            raise ValueError(msg)

    @property
    def text(self) -> str:
        """Source letters this lexeme was scanned from."""
        return self.token * self.count


@dataclass(frozen=True, slots=True)
class BlobLexeme:
    """Literal text, emitted verbatim.

    Attributes:
        text: The literal text (never empty when produced by the parser)
    """

    text: str


Lexeme: TypeAlias = TokenLexeme | BlobLexeme
