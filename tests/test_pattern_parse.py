import pytest

from langspec.cstfy import Cstfied, uncstfy
from langspec.cursor import KeywordMismatch, ParseCursor, Parser, bounded_nat_lookahead
from langspec.parsing import UnexpectedEndOfInput
from langspec.pattern_parse import (
    named_pattern_lookahead,
    or_variable_lookahead,
    parse_named_pattern,
    parse_or_variable,
    parse_or_variable_zero_or_more,
)
from langspec.pattern_tmf import Ctor, Ignore, NamedPattern, Var, ZeroOrMoreVar


def nat(parser):
    return parser.parse_bounded_nat()


def test_variable():
    parser = Parser("$ x")
    result = parse_or_variable(parser, nat)
    assert uncstfy(result) == Var("x")
    assert parser.pc.position == len("$ x")
    assert result.metadata.location.offset == 0
    assert result.metadata.location.end == len("$ x")


def test_wildcard():
    parser = Parser("_")
    assert uncstfy(parse_or_variable(parser, nat)) == Ignore()


def test_constructor_falls_through():
    parser = Parser("7")
    value = uncstfy(parse_or_variable(parser, nat))
    assert isinstance(value, Ctor)
    assert uncstfy(value.value) == 7


def test_variable_without_name():
    with pytest.raises(UnexpectedEndOfInput):
        parse_or_variable(Parser("$"), nat)


def test_empty_input():
    with pytest.raises(UnexpectedEndOfInput):
        parse_or_variable(Parser("   "), nat)


def test_zero_or_more():
    parser = Parser("... xs")
    assert uncstfy(parse_or_variable_zero_or_more(parser, nat)) == ZeroOrMoreVar("xs")
    assert parser.pc.pop_word() is None


def test_zero_or_more_other_forms():
    assert uncstfy(parse_or_variable_zero_or_more(Parser("$ y"), nat)) == Var("y")
    assert uncstfy(parse_or_variable_zero_or_more(Parser("_"), nat)) == Ignore()
    ctor = uncstfy(parse_or_variable_zero_or_more(Parser("3"), nat))
    assert uncstfy(ctor.value) == 3


def test_named_pattern():
    parser = Parser("@ foo = $ x")
    result = parse_named_pattern(parser, lambda p: parse_or_variable(p, nat))
    named = uncstfy(result)
    assert isinstance(named, NamedPattern)
    assert named.name == "foo"
    assert uncstfy(named.pattern) == Var("x")
    assert isinstance(result, Cstfied)


def test_named_pattern_requires_at():
    with pytest.raises(KeywordMismatch):
        parse_named_pattern(Parser("foo = 1"), nat)


def test_named_pattern_requires_equals():
    with pytest.raises(KeywordMismatch):
        parse_named_pattern(Parser("@ foo 1"), nat)


def test_or_variable_lookahead_always_matches():
    assert or_variable_lookahead(ParseCursor("}")) is True


def test_named_pattern_lookahead():
    cursor = ParseCursor("@ n = 5")
    assert named_pattern_lookahead(cursor, bounded_nat_lookahead) is True
    assert cursor.position == 0
    assert named_pattern_lookahead(ParseCursor("@ n = {"), bounded_nat_lookahead) is False