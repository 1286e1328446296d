"""Pattern syntax: lexemes, tokenizer and serializer.

This package knows nothing about calendar fields; it only splits pattern
source into letter runs and literal text.

Exports:
    TokenLexeme, BlobLexeme, Lexeme: Lexeme types
    parse: Tokenize a pattern string
    serialize: Convert lexemes back to canonical pattern source

Python 3.13+. Zero external dependencies.
"""

from .lexemes import BlobLexeme, Lexeme, TokenLexeme
from .parser import parse
from .serializer import serialize

__all__ = ["BlobLexeme", "Lexeme", "TokenLexeme", "parse", "serialize"]
