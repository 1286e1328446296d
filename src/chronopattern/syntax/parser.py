"""Pattern tokenizer.

Turns a raw pattern string into an ordered lexeme stream.

PATTERN GRAMMAR:
    Scanning is left to right, greedy and non-overlapping:

    1. A maximal run of one repeated ASCII letter becomes a TokenLexeme with
       that letter and the run length. Letters are case-sensitive: "M" and
       "m" are unrelated tokens, and "Mm" is two tokens.
    2. Single quotes delimit literal text: 'at' produces "at".
       Two consecutive single quotes produce a literal quote, both outside
       ("h''mm" -> h ' mm) and inside a quoted section
       ("'o''clock'" -> "o'clock").
    3. Any other run of characters that are neither ASCII letters nor quotes
       becomes a BlobLexeme verbatim.

    Adjacent blobs are merged, so one logical literal run always compiles to
    exactly one node: "'T'" between "dd" and "HH" plus any punctuation
    around it end up in a single BlobLexeme.

LENIENCY:
    The grammar never fails. An unterminated quote opens a literal section
    that runs to the end of the pattern ("HH 'o clock" -> HH, " o clock").

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from chronopattern.constants import QUOTE

from .lexemes import BlobLexeme, Lexeme, TokenLexeme

__all__ = ["is_pattern_letter", "parse"]


def is_pattern_letter(char: str) -> bool:
    """Return True if char can start a TokenLexeme."""
    return char.isascii() and char.isalpha()


def parse(pattern: str) -> tuple[Lexeme, ...]:
    """Tokenize a pattern string into lexemes.

    Examples:
        "yyyy-MM-dd" -> (yyyy, "-", MM, "-", dd)
        "h 'o''clock' a" -> (h, " o'clock ", a)
        "" -> ()

    Args:
        pattern: Pattern string (may be empty)

    Returns:
        Tuple of TokenLexeme and BlobLexeme, with no two adjacent blobs.
    """
    lexemes: list[Lexeme] = []
    # Literal text accumulated since the last token; flushed as one blob
    literal_chars: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == QUOTE:
            # '' outside a quoted section -> literal quote
            if i + 1 < n and pattern[i + 1] == QUOTE:
                literal_chars.append(QUOTE)
                i += 2
                continue

            i += 1  # Skip opening quote
            while i < n:
                if pattern[i] == QUOTE:
                    if i + 1 < n and pattern[i + 1] == QUOTE:
                        literal_chars.append(QUOTE)
                        i += 2
                    else:
                        i += 1  # Closing quote
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1
            continue

        if is_pattern_letter(char):
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            _flush_literal(lexemes, literal_chars)
            lexemes.append(TokenLexeme(char, j - i))
            i = j
            continue

        literal_chars.append(char)
        i += 1

    _flush_literal(lexemes, literal_chars)
    return tuple(lexemes)


def _flush_literal(lexemes: list[Lexeme], literal_chars: list[str]) -> None:
    if literal_chars:
        lexemes.append(BlobLexeme("".join(literal_chars)))
        literal_chars.clear()
