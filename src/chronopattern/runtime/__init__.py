"""Formatting runtime: nodes, token catalog, compiler and pattern cache.

Exports:
    Compiler, CompiledPattern: Pattern compilation and rendering
    compile_pattern, render: Default-catalog shortcuts
    TokenKind, CATALOG: The fixed token catalog
    PatternCache: Thread-safe LRU of compiled patterns

Python 3.13+.
"""

from .cache import PatternCache
from .compiler import DEFAULT_COMPILER, CompiledPattern, Compiler, compile_pattern, render
from .tokens import CATALOG, TokenKind

__all__ = [
    "CATALOG",
    "DEFAULT_COMPILER",
    "CompiledPattern",
    "Compiler",
    "PatternCache",
    "TokenKind",
    "compile_pattern",
    "render",
]
