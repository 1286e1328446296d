"""Pattern compiler: lexeme stream -> immutable node sequence.

The compiler resolves each lexeme against its token catalog:
- TokenLexeme with a known letter -> factory.for_occurrence(count)
- TokenLexeme with an unknown letter -> LiteralNode of the original run
- BlobLexeme -> LiteralNode

Unknown letters are not errors. Arbitrary letters can appear in a pattern
and simply come out as written ("T" in "yyyy-MM-ddTHH:mm" renders as "T").

Thread-safe. Compilers are immutable after construction and CompiledPattern
instances can be rendered concurrently.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from chronopattern.core.accessor import as_date_value
from chronopattern.localization.messages import LocaleMessages
from chronopattern.syntax.lexemes import BlobLexeme, TokenLexeme
from chronopattern.syntax.parser import parse

from .nodes import LiteralNode, MessageNode, Node
from .tokens import default_factories

if TYPE_CHECKING:
    from collections.abc import Iterator

    from chronopattern.syntax.lexemes import Lexeme

    from .tokens import NodeFactory

__all__ = ["DEFAULT_COMPILER", "CompiledPattern", "Compiler", "compile_pattern", "render"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Ordered, immutable node sequence compiled from one pattern string.

    Reusable for any number of render calls. A pattern string never changes
    meaning, so a CompiledPattern never needs invalidation.

    Attributes:
        pattern: Source pattern string
        nodes: Nodes in output order
    """

    pattern: str
    nodes: tuple[Node, ...]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def is_locale_dependent(self) -> bool:
        """True if rendering consults locale messages (month/weekday names)."""
        return any(isinstance(node, MessageNode) for node in self.nodes)

    @property
    def message_prefixes(self) -> frozenset[str]:
        """Message key prefixes consulted while rendering (e.g. "months.full")."""
        return frozenset(node.prefix for node in self.nodes if isinstance(node, MessageNode))

    def render(self, value: object, messages: LocaleMessages | Mapping[str, str]) -> str:
        """Render every node in order and concatenate the fragments.

        Args:
            value: datetime, date, or DateValue to format
            messages: Locale messages; a plain mapping is wrapped in
                LocaleMessages

        Returns:
            The formatted string.

        Raises:
            TypeError: If value is not a supported date value.
            MessageLookupError: If a month/weekday key is missing.
            LocaleNotRegisteredError: If messages stand in for an
                unregistered default locale and a name is requested.
        """
        date_value = as_date_value(value)
        if not isinstance(messages, LocaleMessages):
            messages = LocaleMessages(messages)
        return "".join(node.render(date_value, messages) for node in self.nodes)


class Compiler:
    """Compiles pattern strings against a fixed token catalog.

    Factories are keyed by their token letter. When two factories claim the
    same letter, the later one wins.

    Example:
        >>> compiler = Compiler()  # default catalog
        >>> compiled = compiler.compile("yyyy-MM-dd")
        >>> len(compiled)
        5
    """

    __slots__ = ("_factories",)

    def __init__(self, *factories: NodeFactory) -> None:
        """Initialize compiler.

        Args:
            *factories: Node factories to use. With none, the default
                catalog (every TokenKind) is used.
        """
        if not factories:
            factories = default_factories()
        self._factories: Mapping[str, NodeFactory] = MappingProxyType(
            {factory.token: factory for factory in factories}
        )

    @property
    def tokens(self) -> frozenset[str]:
        """Pattern letters this compiler recognizes."""
        return frozenset(self._factories)

    def compile(self, pattern: str) -> CompiledPattern:
        """Compile a pattern string.

        Total over every string: unknown letters and unterminated quotes
        degrade to literal text, and "" compiles to an empty sequence.

        Args:
            pattern: Pattern string

        Returns:
            CompiledPattern for the pattern.
        """
        nodes = tuple(self.compile_lexeme(lexeme) for lexeme in parse(pattern))
        logger.debug("Compiled pattern %r into %d nodes", pattern, len(nodes))
        return CompiledPattern(pattern, nodes)

    def compile_lexeme(self, lexeme: Lexeme) -> Node:
        """Resolve one lexeme into a node."""
        match lexeme:
            case TokenLexeme(token=token, count=count):
                factory = self._factories.get(token)
                if factory is not None:
                    return factory.for_occurrence(count)
                logger.debug("Unknown pattern letter %r, emitting it literally", token)
                return LiteralNode(lexeme.text)
            case BlobLexeme(text=text):
                return LiteralNode(text)
            case _:
                msg = f"Expected TokenLexeme or BlobLexeme, got {type(lexeme).__name__}"
                raise TypeError(msg)


DEFAULT_COMPILER = Compiler()


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a pattern with the default token catalog.

    Example:
        >>> compile_pattern("HH:mm").is_locale_dependent
        False
    """
    return DEFAULT_COMPILER.compile(pattern)


def render(
    compiled: CompiledPattern, value: object, messages: LocaleMessages | Mapping[str, str]
) -> str:
    """Render a compiled pattern for one value and one set of locale messages.

    Example:
        >>> from datetime import datetime
        >>> render(compile_pattern("yyyy-MM-dd'T'HH:mm"), datetime(2018, 11, 1, 9, 5), {})
        '2018-11-01T09:05'
    """
    return compiled.render(value, messages)
