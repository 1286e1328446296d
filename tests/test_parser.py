"""Tests for the pattern tokenizer.

Tests verify:
- Letter runs become TokenLexemes (case-sensitive, maximal runs)
- Quoted sections and doubled quotes become literal text
- Adjacent literal text is merged into one BlobLexeme
- Unterminated quotes run to the end of the pattern
- Non-ASCII letters are literal text
"""

import pytest

from chronopattern.syntax import BlobLexeme, TokenLexeme, parse
from chronopattern.syntax.parser import is_pattern_letter


class TestLetterRuns:
    """Test tokenization of letter runs."""

    def test_empty_pattern(self) -> None:
        """Empty pattern produces no lexemes."""
        assert parse("") == ()

    def test_iso_date(self) -> None:
        """Runs are split on the letter changing."""
        assert parse("yyyy-MM-dd") == (
            TokenLexeme("y", 4),
            BlobLexeme("-"),
            TokenLexeme("M", 2),
            BlobLexeme("-"),
            TokenLexeme("d", 2),
        )

    def test_case_sensitive(self) -> None:
        """'M' and 'm' are unrelated letters."""
        assert parse("Mm") == (TokenLexeme("M"), TokenLexeme("m"))

    def test_long_run(self) -> None:
        """A run of any length is one lexeme."""
        assert parse("EEEEEEE") == (TokenLexeme("E", 7),)

    def test_unknown_letters_still_tokens(self) -> None:
        """The tokenizer does not know the catalog."""
        assert parse("QQ") == (TokenLexeme("Q", 2),)

    def test_non_ascii_letters_are_literal(self) -> None:
        """Letters outside ASCII never start a token."""
        assert parse("ddéMM") == (
            TokenLexeme("d", 2),
            BlobLexeme("é"),
            TokenLexeme("M", 2),
        )


class TestQuoting:
    """Test quoted literals and escaped quotes."""

    def test_quoted_letters(self) -> None:
        """Letters inside quotes are literal."""
        assert parse("'at' HH") == (BlobLexeme("at "), TokenLexeme("H", 2))

    def test_doubled_quote_outside(self) -> None:
        """'' outside quotes is one literal quote."""
        assert parse("h''mm") == (TokenLexeme("h"), BlobLexeme("'"), TokenLexeme("m", 2))

    def test_doubled_quote_inside(self) -> None:
        """'' inside a quoted section is one literal quote."""
        assert parse("h 'o''clock' a") == (
            TokenLexeme("h"),
            BlobLexeme(" o'clock "),
            TokenLexeme("a"),
        )

    def test_quoted_section_ending_in_escaped_quote(self) -> None:
        """'abc''' is abc followed by a quote."""
        assert parse("'abc'''") == (BlobLexeme("abc'"),)

    def test_only_quotes(self) -> None:
        """Each '' pair is one literal quote."""
        assert parse("''") == (BlobLexeme("'"),)
        assert parse("''''") == (BlobLexeme("''"),)

    def test_t_separator(self) -> None:
        """Quoted T and its surroundings form one blob."""
        assert parse("dd'T'HH") == (
            TokenLexeme("d", 2),
            BlobLexeme("T"),
            TokenLexeme("H", 2),
        )

    def test_empty_quoted_section_between_letters(self) -> None:
        """A literal quote separates two runs of the same letter."""
        assert parse("d''d") == (TokenLexeme("d"), BlobLexeme("'"), TokenLexeme("d"))


class TestMerging:
    """Test that adjacent literal text is merged."""

    def test_punctuation_and_quoted_text_merge(self) -> None:
        """Plain and quoted literal text form a single blob."""
        assert parse("yyyy, 'week' w") == (
            TokenLexeme("y", 4),
            BlobLexeme(", week "),
            TokenLexeme("w"),
        )

    def test_consecutive_quoted_sections_merge(self) -> None:
        """'a' 'b' is one blob."""
        assert parse("'a' 'b'") == (BlobLexeme("a b"),)


class TestUnterminatedQuote:
    """Test leniency for unterminated quotes."""

    def test_runs_to_end(self) -> None:
        """An unterminated quote makes the rest of the pattern literal."""
        assert parse("HH 'o clock") == (TokenLexeme("H", 2), BlobLexeme(" o clock"))

    def test_lone_quote(self) -> None:
        """A lone quote at the end produces nothing."""
        assert parse("HH'") == (TokenLexeme("H", 2),)


class TestIsPatternLetter:
    """Test is_pattern_letter."""

    @pytest.mark.parametrize("char", ["a", "Z", "y", "q"])
    def test_ascii_letters(self, char: str) -> None:
        """ASCII letters start tokens."""
        assert is_pattern_letter(char)

    @pytest.mark.parametrize("char", ["1", "-", "'", " ", "é", "ß"])
    def test_other_characters(self, char: str) -> None:
        """Everything else is literal text."""
        assert not is_pattern_letter(char)
