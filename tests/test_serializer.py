"""Tests for the lexeme stream serializer."""

import pytest

from chronopattern.syntax import BlobLexeme, TokenLexeme, parse, serialize


class TestSerialize:
    """Test serialize() output."""

    def test_empty(self) -> None:
        """No lexemes, empty pattern."""
        assert serialize(()) == ""

    def test_tokens_and_punctuation(self) -> None:
        """Punctuation needs no quoting."""
        assert serialize(parse("yyyy-MM-dd HH:mm")) == "yyyy-MM-dd HH:mm"

    def test_letters_are_quoted(self) -> None:
        """Blobs containing letters are wrapped in quotes."""
        lexemes = (TokenLexeme("d", 2), BlobLexeme("T"), TokenLexeme("H", 2))
        assert serialize(lexemes) == "dd'T'HH"

    def test_quotes_are_doubled(self) -> None:
        """A quote in literal text is written as ''."""
        assert serialize((TokenLexeme("h"), BlobLexeme("'"), TokenLexeme("m", 2))) == "h''mm"

    def test_quote_inside_quoted_text(self) -> None:
        """Quotes are doubled inside quoted sections too."""
        assert serialize((BlobLexeme(" o'clock "),)) == "' o''clock '"

    def test_unterminated_quote_is_closed(self) -> None:
        """The canonical form of an unterminated quote is terminated."""
        assert serialize(parse("HH 'o clock")) == "HH' o clock'"

    def test_accepts_generators(self) -> None:
        """Any iterable of lexemes works."""
        assert serialize(lexeme for lexeme in parse("d/M")) == "d/M"

    def test_rejects_non_lexemes(self) -> None:
        """Other objects raise TypeError."""
        with pytest.raises(TypeError, match="Expected TokenLexeme or BlobLexeme"):
            serialize(["yyyy"])  # type: ignore[list-item]


class TestLexemeValidation:
    """Test TokenLexeme invariants."""

    def test_text(self) -> None:
        """text repeats the letter count times."""
        assert TokenLexeme("M", 3).text == "MMM"

    @pytest.mark.parametrize("token", ["", "yy", "1", "é", "'"])
    def test_invalid_token(self, token: str) -> None:
        """Only single ASCII letters are tokens."""
        with pytest.raises(ValueError, match="single ASCII letter"):
            TokenLexeme(token)

    def test_invalid_count(self) -> None:
        """Count must be positive."""
        with pytest.raises(ValueError, match="count must be >= 1"):
            TokenLexeme("y", 0)
