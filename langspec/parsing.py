"""Keywords, source spans, parse metadata and parse errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Keyword:
    """A keyword of concrete syntax; validated when read."""

    text: str

    def get(self) -> str:
        """The keyword text; raises ValueError if it is empty or has whitespace."""
        if not self.text:
            raise ValueError("Keyword cannot be empty")
        if any(c.isspace() for c in self.text):
            raise ValueError("Keyword cannot contain whitespace")
        return self.text

    def __str__(self) -> str:
        return f"`{self.text}`"


KeywordSequence = tuple[Keyword, ...]


@dataclass(frozen=True)
class SourceSpan:
    """A stretch of source text: start offset and length."""

    offset: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.offset + self.length


class TokenKind(enum.Enum):
    FUNCTION_SYMBOL = "function_symbol"
    LITERAL = "literal"
    SANITY_CHECK = "sanity_check"


@dataclass(frozen=True)
class ParseMetadata:
    """Where in the source a node was parsed from."""

    location: SourceSpan


class ParseError(Exception):
    """A parse failure located at a span of the source."""

    def __init__(self, span: SourceSpan) -> None:
        super().__init__(span)
        self.span = span

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.span == other.span  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.span))

    def merge_over(self, previous: Optional[ParseError]) -> ParseError:
        """Combine with an earlier error; the newer error wins."""
        return self


class UnexpectedTokenError(ParseError):
    """A token that no alternative expected."""

    @property
    def at(self) -> SourceSpan:
        return self.span

    def merge_over(self, previous: Optional[ParseError]) -> ParseError:
        """An earlier unexpected-token error is kept; anything else is replaced."""
        if isinstance(previous, UnexpectedTokenError):
            return previous
        return self

    def __str__(self) -> str:
        return "expected one of "


class UnexpectedEndOfInput(ParseError):
    def __str__(self) -> str:
        return "unexpected end of input"


class TmfsParseFailure(ParseError):
    def __str__(self) -> str:
        return "failed to parse tmfs"


class RecursionLimitExceeded(ParseError):
    def __str__(self) -> str:
        return f"recursion limit exceeded at offset {self.span.offset}"