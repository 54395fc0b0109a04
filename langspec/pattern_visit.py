"""Feeding pattern meta-function values into a :class:`PatternBuilder`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from langspec.pattern_dyn import PatternBuilder
from langspec.pattern_tmf import Ctor, Ignore, NamedPattern, Var, ZeroOrMoreVar

VisitFn = Callable[[PatternBuilder, Any], None]


def visit_or_variable_zero_or_more(
    builder: PatternBuilder, value: Any, sort_idx: int, visit_matched: VisitFn
) -> None:
    """Record ``value`` in ``builder``; variables take the sort at ``sort_idx``."""
    if isinstance(value, Ctor):
        visit_matched(builder, value.value)
    elif isinstance(value, Var):
        builder.variable(sort_idx, value.name)
    elif isinstance(value, Ignore):
        builder.ignored(sort_idx)
    elif isinstance(value, ZeroOrMoreVar):
        builder.vzom(sort_idx, value.name)
    else:
        raise TypeError(f"not an or-variable-zero-or-more: {value!r}")


def visit_named_pattern(
    builder: PatternBuilder, value: NamedPattern, visit_pattern: VisitFn
) -> None:
    """Record the inner pattern, then give it the pattern's name."""
    if not isinstance(value, NamedPattern):
        raise TypeError(f"not a named pattern: {value!r}")
    visit_pattern(builder, value.pattern)
    builder.named(value.name)