import pytest

from langspec.parsing import (
    Keyword,
    ParseError,
    ParseMetadata,
    RecursionLimitExceeded,
    SourceSpan,
    TmfsParseFailure,
    UnexpectedEndOfInput,
    UnexpectedTokenError,
)


def test_keyword_get():
    assert Keyword("plus").get() == "plus"


@pytest.mark.parametrize("text", ["", "a b", " x", "x\n"])
def test_keyword_invalid(text):
    with pytest.raises(ValueError):
        Keyword(text).get()


def test_keyword_display():
    assert str(Keyword("x")) == "`x`"


def test_messages():
    span = SourceSpan(7, 1)
    assert str(UnexpectedEndOfInput(span)) == "unexpected end of input"
    assert str(TmfsParseFailure(span)) == "failed to parse tmfs"
    assert str(RecursionLimitExceeded(span)) == "recursion limit exceeded at offset 7"
    assert str(UnexpectedTokenError(span)).startswith("expected one of")


def test_errors_are_raisable():
    with pytest.raises(ParseError) as info:
        raise TmfsParseFailure(SourceSpan(2, 3))
    assert info.value.span == SourceSpan(2, 3)


def test_unexpected_token_at():
    assert UnexpectedTokenError(SourceSpan(4)).at == SourceSpan(4)


def test_merge_over_none():
    err = UnexpectedEndOfInput(SourceSpan(1))
    assert err.merge_over(None) is err
    tok = UnexpectedTokenError(SourceSpan(1))
    assert tok.merge_over(None) is tok


def test_merge_unexpected_tokens_keeps_previous():
    prev = UnexpectedTokenError(SourceSpan(1))
    cur = UnexpectedTokenError(SourceSpan(9))
    assert cur.merge_over(prev) is prev


def test_merge_other_kinds_take_current():
    prev_tok = UnexpectedTokenError(SourceSpan(1))
    cur = TmfsParseFailure(SourceSpan(5))
    assert cur.merge_over(prev_tok) is cur
    prev_other = UnexpectedEndOfInput(SourceSpan(2))
    tok = UnexpectedTokenError(SourceSpan(3))
    assert tok.merge_over(prev_other) is tok
    assert cur.merge_over(prev_other) is cur


def test_error_equality():
    assert TmfsParseFailure(SourceSpan(1, 2)) == TmfsParseFailure(SourceSpan(1, 2))
    assert TmfsParseFailure(SourceSpan(1, 2)) != UnexpectedEndOfInput(SourceSpan(1, 2))


def test_span_and_metadata():
    span = SourceSpan(3, 4)
    assert span.end == span.offset + span.length
    assert ParseMetadata(span).location == span