"""Reading pattern meta-function values from concrete syntax.

``$ name`` is a variable and ``_`` a wildcard. A run of dots followed by a
name, as in ``... name``, binds zero or more terms. ``@ name = pattern``
names a pattern. Anything else is read as a concrete term.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

from langspec.cstfy import Cstfied, cstfy_ok
from langspec.cursor import KeywordMismatch, ParseCursor, Parser
from langspec.parsing import SourceSpan, UnexpectedEndOfInput
from langspec.pattern_tmf import Ctor, Ignore, NamedPattern, Var, ZeroOrMoreVar

ParseFn = Callable[[Parser], Any]


def _peek(parser: Parser) -> str:
    found = next(parser.pc.peek_words(), None)
    if found is None:
        raise UnexpectedEndOfInput(SourceSpan(parser.pc.position))
    return found[1]


def _pop(parser: Parser) -> str:
    word = parser.pc.pop_word()
    if word is None:
        raise UnexpectedEndOfInput(SourceSpan(parser.pc.position))
    return word


def parse_or_variable(parser: Parser, parse_matched: ParseFn) -> Cstfied:
    """Read a variable, a wildcard, or a term parsed by ``parse_matched``."""
    previous = parser.pc.position
    word = _peek(parser)
    if word == "$":
        parser.pc.pop_word()
        value: Any = Var(_pop(parser))
    elif word == "_":
        parser.pc.pop_word()
        value = Ignore()
    else:
        value = Ctor(parse_matched(parser))
    return cstfy_ok(value, previous, parser.pc.position)


def parse_or_variable_zero_or_more(parser: Parser, parse_matched: ParseFn) -> Cstfied:
    """Like :func:`parse_or_variable`, also accepting a zero-or-more variable."""
    previous = parser.pc.position
    word = _peek(parser)
    if word == ".":
        while _peek(parser) == ".":
            parser.pc.pop_word()
        value: Any = ZeroOrMoreVar(_pop(parser))
    elif word == "$":
        parser.pc.pop_word()
        value = Var(_pop(parser))
    elif word == "_":
        parser.pc.pop_word()
        value = Ignore()
    else:
        value = Ctor(parse_matched(parser))
    return cstfy_ok(value, previous, parser.pc.position)


def parse_named_pattern(parser: Parser, parse_pattern: ParseFn) -> Cstfied:
    """Read ``@ name = pattern``, parsing the pattern with ``parse_pattern``."""
    previous = parser.pc.position
    if _pop(parser) != "@":
        raise KeywordMismatch("expected @")
    name = _pop(parser)
    if _pop(parser) != "=":
        raise KeywordMismatch("expected =")
    pattern = parse_pattern(parser)
    return cstfy_ok(NamedPattern(pattern=pattern, name=name), previous, parser.pc.position)


def or_variable_lookahead(cursor: ParseCursor) -> bool:
    """Always true: an or-variable only appears where it is the sole choice."""
    return True


def named_pattern_lookahead(
    cursor: ParseCursor, elem_lookahead: Callable[[ParseCursor], bool]
) -> bool:
    """Whether the pattern after the ``=`` matches ``elem_lookahead``."""
    ahead = dataclasses.replace(cursor)
    while True:
        word = ahead.pop_word()
        if word is None or word == "=":
            break
    return elem_lookahead(ahead)