import pytest

from langspec.cstfy import uncstfy
from langspec.cursor import Parser
from langspec.pattern_parse import (
    parse_named_pattern,
    parse_or_variable,
    parse_or_variable_zero_or_more,
)
from langspec.pattern_tmf import Ctor, Ignore, NamedPattern, Var, ZeroOrMoreVar
from langspec.pattern_unparse import (
    Unparse,
    unparse_named_pattern,
    unparse_or_variable,
    unparse_or_variable_zero_or_more,
)


def write_nat(out, value):
    out.dynamic_text(str(value))


def read_nat(parser):
    return uncstfy(parser.parse_bounded_nat())


def render(fn, value):
    out = Unparse()
    fn(out, value, write_nat)
    return out.text()


def test_variable_text():
    assert render(unparse_or_variable, Var("x")) == "$ x"


def test_wildcard_text():
    assert render(unparse_or_variable, Ignore()) == "_"


def test_ctor_delegates():
    out = Unparse()
    unparse_or_variable(out, Ctor(42), write_nat)
    assert out.pieces == ["42"]


def test_not_an_or_variable():
    with pytest.raises(TypeError):
        render(unparse_or_variable, ZeroOrMoreVar("xs"))


def test_zero_or_more_text_starts_with_dots():
    out = Unparse()
    unparse_or_variable_zero_or_more(out, ZeroOrMoreVar("xs"), write_nat)
    assert out.pieces == ["...", "xs"]


@pytest.mark.parametrize("value", [Var("a"), Ignore(), Ctor(9)])
def test_or_variable_round_trip(value):
    text = render(unparse_or_variable, value)
    assert uncstfy(parse_or_variable(Parser(text), read_nat)) == value


@pytest.mark.parametrize("value", [ZeroOrMoreVar("rest"), Var("b"), Ignore(), Ctor(3)])
def test_zero_or_more_round_trip(value):
    text = render(unparse_or_variable_zero_or_more, value)
    assert uncstfy(parse_or_variable_zero_or_more(Parser(text), read_nat)) == value


def test_named_pattern_round_trip():
    value = NamedPattern(pattern=Var("x"), name="top")
    out = Unparse()
    unparse_named_pattern(
        out, value, lambda o, p: unparse_or_variable(o, p, write_nat)
    )
    parsed = uncstfy(
        parse_named_pattern(
            Parser(out.text()), lambda p: uncstfy(parse_or_variable(p, read_nat))
        )
    )
    assert parsed == value
    assert out.pieces[0] == "@"


def test_named_pattern_rejects_other_values():
    with pytest.raises(TypeError):
        unparse_named_pattern(Unparse(), Var("x"), write_nat)