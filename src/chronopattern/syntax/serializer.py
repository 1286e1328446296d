"""Lexeme stream serializer.

Converts a lexeme stream back into pattern source. The output is canonical:
literal text is quoted only when it contains ASCII letters or quotes that
would otherwise be read as tokens or delimiters, so

    parse(serialize(parse(p))) == parse(p)

holds for every pattern ``p``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronopattern.constants import QUOTE

from .lexemes import BlobLexeme, TokenLexeme
from .parser import is_pattern_letter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .lexemes import Lexeme

__all__ = ["serialize"]


def serialize(lexemes: Iterable[Lexeme]) -> str:
    """Serialize lexemes to pattern source.

    The stream is expected to be normalized the way parse() produces it:
    no two adjacent blobs, and no two adjacent tokens with the same letter
    (those would read back as a single longer run).

    Args:
        lexemes: Lexemes to serialize

    Returns:
        Pattern string that tokenizes back to the same lexemes.

    Raises:
        TypeError: If an element is not a lexeme.
    """
    parts: list[str] = []
    for lexeme in lexemes:
        match lexeme:
            case TokenLexeme():
                parts.append(lexeme.text)
            case BlobLexeme(text=text):
                parts.append(_quote_literal(text))
            case _:
                msg = f"Expected TokenLexeme or BlobLexeme, got {type(lexeme).__name__}"
                raise TypeError(msg)
    return "".join(parts)


def _quote_literal(text: str) -> str:
    escaped = text.replace(QUOTE, QUOTE * 2)
    if any(is_pattern_letter(char) for char in text):
        return f"{QUOTE}{escaped}{QUOTE}"
    return escaped
