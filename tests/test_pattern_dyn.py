import pytest

from langspec.core import ProductSortId, SumSortId
from langspec.pattern_dyn import (
    AmbiguousPatternError,
    CompositePattern,
    EmptyPatternError,
    IgnoredPattern,
    LiteralPattern,
    NamedDynPattern,
    PatternBuilder,
    PatternBuilderError,
    ToDynPatternError,
    VariablePattern,
    ZeroOrMorePattern,
)

SIDS = [ProductSortId(0), SumSortId(0), ProductSortId(1)]


def builder():
    return PatternBuilder(SIDS)


def test_single_literal_is_result():
    pb = builder()
    pb.literal(0, 5)
    assert pb.result() == LiteralPattern(ProductSortId(0), 5)


def test_variable_and_vzom_and_ignored_use_sort_table():
    pb = builder()
    pb.variable(1, "x")
    pb.vzom(2, "xs")
    pb.ignored(0)
    pb.pop(2, 3)
    assert pb.result() == CompositePattern(
        ProductSortId(1),
        (
            VariablePattern(SumSortId(0), "x"),
            ZeroOrMorePattern(ProductSortId(1), "xs"),
            IgnoredPattern(ProductSortId(0)),
        ),
    )


def test_pop_takes_only_last_components():
    pb = builder()
    pb.variable(0, "a")
    pb.variable(0, "b")
    pb.variable(0, "c")
    pb.pop(1, 2)
    assert len(pb.stack) == 2
    assert pb.stack[0] == VariablePattern(ProductSortId(0), "a")
    assert pb.stack[1].components == (
        VariablePattern(ProductSortId(0), "b"),
        VariablePattern(ProductSortId(0), "c"),
    )


def test_pop_zero_makes_leaf_composite():
    pb = builder()
    pb.pop(0, 0)
    assert pb.result() == CompositePattern(ProductSortId(0), ())


def test_pop_with_too_few_raises():
    pb = builder()
    pb.ignored(0)
    with pytest.raises(ValueError):
        pb.pop(0, 2)


def test_named_wraps_last_pattern():
    pb = builder()
    pb.ignored(1)
    pb.named("p")
    assert pb.result() == NamedDynPattern("p", IgnoredPattern(SumSortId(0)))


def test_named_on_empty_stack_raises():
    with pytest.raises(IndexError):
        builder().named("p")


def test_unknown_sort_index_raises():
    with pytest.raises(IndexError):
        builder().ignored(len(SIDS))


def test_empty_result():
    with pytest.raises(EmptyPatternError, match="there are no patterns"):
        builder().result()


def test_ambiguous_result():
    pb = builder()
    pb.ignored(0)
    pb.ignored(0)
    with pytest.raises(AmbiguousPatternError, match="not all patterns are complete"):
        pb.result()


def test_errors_share_base():
    pb = builder()
    with pytest.raises(PatternBuilderError):
        pb.result()


def test_push_and_proceed_always_proceed():
    pb = builder()
    assert pb.push() is True
    assert pb.proceed(0, 3) is True
    assert pb.stack == []


def test_to_dyn_pattern_error_message():
    assert str(ToDynPatternError()) == "invalid sequence of pattern match components"