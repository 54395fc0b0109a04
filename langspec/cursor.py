"""A word-level cursor over source text and an LL parser driven by keywords."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from langspec.cstfy import CstError, Cstfy, cstfy_err, cstfy_ok
from langspec.parsing import (
    Keyword,
    SourceSpan,
    TmfsParseFailure,
    UnexpectedEndOfInput,
    UnexpectedTokenError,
)

# Word boundaries in the spirit of Unicode text segmentation: runs of word
# characters (letters may be joined by ':', '.', apostrophes; digits by ',',
# ';', '.', apostrophes), runs of whitespace, and any other single character.
_SEGMENT = re.compile(
    r"""
    \w+(?:(?:(?<=[^\W\d_])[:\u00b7.'\u2019](?=[^\W\d_])
           |(?<=\d)[,;.'\u2019](?=\d))\w+)*
    |\s+
    |.
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass
class ParseCursor:
    """A position in a source text, read a word at a time."""

    source: str
    position: int = 0

    def peek_words(self) -> Iterator[tuple[int, str]]:
        """Words ahead of the cursor, with offsets relative to the cursor."""
        rest = self.source[self.position:]
        for m in _SEGMENT.finditer(rest):
            word = m.group()
            if word and not any(c.isspace() for c in word):
                yield m.start(), word

    def pop_word(self) -> Optional[str]:
        """Consume and return the next word, or None at the end of input."""
        found = next(self.peek_words(), None)
        if found is None:
            return None
        offset, word = found
        self.position += offset + len(word)
        return word

    def match_keywords(self, keywords: Sequence[Keyword]) -> Optional[int]:
        """The offset just past ``keywords`` if they come next, else None."""
        expected = iter(keywords)
        last_offset = self.position
        for (offset, word), keyword in zip(self.peek_words(), expected):
            if word != keyword.get():
                return None
            last_offset = self.position + offset + len(word)
        if next(expected, None) is not None:
            return None
        return last_offset


@dataclass(frozen=True)
class ParseLL:
    """Keywords that open, separate and close a node in concrete syntax."""

    start: tuple[Keyword, ...] = ()
    proceed: tuple[tuple[Keyword, ...], ...] = ()
    end: tuple[Keyword, ...] = ()


class KeywordMismatch(ValueError):
    """The source did not hold the word the grammar requires."""


def _first_text(keywords: Sequence[Keyword]) -> str:
    return keywords[0].get() if keywords else ""


class Parser:
    """Reads concrete syntax from a source text."""

    def __init__(self, source: str) -> None:
        self.pc = ParseCursor(source)

    def _expect(self, keywords: Sequence[Keyword], message: str) -> None:
        offset = self.pc.match_keywords(keywords)
        if offset is None:
            raise KeywordMismatch(message)
        self.pc.position = offset

    def push(self, ll: ParseLL) -> None:
        """Consume the start keywords of a node."""
        self._expect(
            ll.start,
            f'Expected start keyword "{_first_text(ll.start)}" but got '
            f'"{self.pc.source[self.pc.position:]}" at position {self.pc.position}',
        )

    def proceed(self, ll: ParseLL, idx: int, total: int) -> None:
        """Consume the separator before child ``idx``; the last one repeats."""
        if not ll.proceed:
            return
        keywords = ll.proceed[idx] if idx < len(ll.proceed) else ll.proceed[-1]
        self._expect(keywords, f"Expected proceed keyword: {_first_text(keywords)}")

    def pop(self, ll: ParseLL) -> None:
        """Consume the end keywords of a node."""
        self._expect(ll.end, f"Expected end keyword: {_first_text(ll.end)}")

    def select_case(self, lookaheads: Sequence[Callable[[ParseCursor], bool]]) -> int:
        """Index of the first case whose lookahead matches; the last case is the default."""
        if not lookaheads:
            raise ValueError("no cases to choose from")
        *tried, _ = lookaheads
        for idx, lookahead in enumerate(tried):
            if lookahead(self.pc):
                return idx
        return len(lookaheads) - 1

    def admit_no_matching_case(self) -> CstError:
        """A failed node reporting an unexpected token at the cursor."""
        return cstfy_err(UnexpectedTokenError(SourceSpan(self.pc.position)))

    def parse_bounded_nat(self) -> Cstfy:
        """Read a natural number."""
        previous = self.pc.position
        word = self.pc.pop_word()
        if word is None:
            raise UnexpectedEndOfInput(SourceSpan(self.pc.position))
        if not (word.isascii() and word.isdigit()):
            return cstfy_err(TmfsParseFailure(SourceSpan(self.pc.position)))
        return cstfy_ok(int(word), previous, self.pc.position)

    def parse_set(self, parse_elem: Callable[[Parser], Any]) -> Cstfy:
        """Read ``{ elem , elem ... }``, parsing each element with ``parse_elem``."""
        initial = self.pc.position
        word = self.pc.pop_word()
        if word is None:
            raise UnexpectedEndOfInput(SourceSpan(self.pc.position))
        if word != "{":
            raise KeywordMismatch(f"Unexpected word: got {word} when expecting {{")
        items = []
        while True:
            items.append(parse_elem(self))
            word = self.pc.pop_word()
            if word == "}":
                break
            if word == ",":
                continue
            if word is None:
                raise UnexpectedEndOfInput(SourceSpan(self.pc.position))
            raise KeywordMismatch(f"Unexpected word: {word}")
        return cstfy_ok(tuple(items), initial, self.pc.position)


def keyword_lookahead(ll: ParseLL) -> Callable[[ParseCursor], bool]:
    """A lookahead that matches when the start keywords of ``ll`` come next."""

    def matches(cursor: ParseCursor) -> bool:
        return cursor.match_keywords(ll.start) is not None

    return matches


def bounded_nat_lookahead(cursor: ParseCursor) -> bool:
    """Whether the next word is a natural number."""
    found = next(cursor.peek_words(), None)
    return found is not None and found[1].isascii() and found[1].isdigit()


def set_lookahead(cursor: ParseCursor) -> bool:
    """Whether the next word opens a set."""
    found = next(cursor.peek_words(), None)
    return found is not None and found[1] == "{"