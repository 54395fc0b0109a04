"""Patterns as plain data, and a builder that assembles them from visit events."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class CompositePattern:
    """A node of sort ``rs_ty`` whose children must match ``components``."""

    rs_ty: Any
    components: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))


@dataclass(frozen=True)
class IgnoredPattern:
    """Matches anything of sort ``sid`` and binds nothing."""

    sid: Any


@dataclass(frozen=True)
class ZeroOrMorePattern:
    """Binds zero or more consecutive items of sort ``sid`` to ``ident``."""

    sid: Any
    ident: str


@dataclass(frozen=True)
class VariablePattern:
    """Binds one item of sort ``sid`` to ``ident``."""

    sid: Any
    ident: str


@dataclass(frozen=True)
class LiteralPattern:
    """Matches an item of sort ``sid`` equal to ``equal_to``."""

    sid: Any
    equal_to: Any


@dataclass(frozen=True)
class NamedDynPattern:
    """A pattern given a name."""

    name: str
    pattern: Any


DynPattern = Union[
    CompositePattern,
    IgnoredPattern,
    ZeroOrMorePattern,
    VariablePattern,
    LiteralPattern,
    NamedDynPattern,
]


class PatternBuilderError(Exception):
    """The builder does not hold exactly one finished pattern."""


class EmptyPatternError(PatternBuilderError):
    def __init__(self) -> None:
        super().__init__("there are no patterns")


class AmbiguousPatternError(PatternBuilderError):
    def __init__(self) -> None:
        super().__init__("not all patterns are complete")


class ToDynPatternError(Exception):
    def __init__(self) -> None:
        super().__init__("invalid sequence of pattern match components")


@dataclass
class PatternBuilder:
    """Builds a pattern bottom-up on a stack; sorts are given by index into ``int2sid``."""

    int2sid: Sequence[Any]
    stack: list = field(default_factory=list)

    def _sid(self, sort_idx: int) -> Any:
        if not 0 <= sort_idx < len(self.int2sid):
            raise IndexError(f"no sort with index {sort_idx}")
        return self.int2sid[sort_idx]

    def literal(self, sort_idx: int, literal: Any) -> None:
        self.stack.append(LiteralPattern(self._sid(sort_idx), literal))

    def variable(self, sort_idx: int, name: str) -> None:
        self.stack.append(VariablePattern(self._sid(sort_idx), name))

    def vzom(self, sort_idx: int, name: str) -> None:
        self.stack.append(ZeroOrMorePattern(self._sid(sort_idx), name))

    def ignored(self, sort_idx: int) -> None:
        self.stack.append(IgnoredPattern(self._sid(sort_idx)))

    def named(self, name: str) -> None:
        """Give the most recent pattern a name."""
        if not self.stack:
            raise IndexError("no pattern to name")
        self.stack.append(NamedDynPattern(name, self.stack.pop()))

    def push(self) -> bool:
        """Entering a node; always asks to proceed."""
        return True

    def proceed(self, idx: int, total: int) -> bool:
        """Moving to the next child; asks to proceed unless the position is invalid."""
        if idx < 0 or total < 0:
            raise ValueError(f"invalid child position {idx} of {total}")
        return self.push()

    def pop(self, sort_idx: int, total: int) -> None:
        """Combine the last ``total`` patterns into a composite of the given sort."""
        if total < 0 or len(self.stack) < total:
            raise ValueError(
                f"cannot combine {total} patterns from a stack of {len(self.stack)}"
            )
        split = len(self.stack) - total
        components = self.stack[split:]
        del self.stack[split:]
        self.stack.append(CompositePattern(self._sid(sort_idx), tuple(components)))

    def result(self) -> DynPattern:
        """The single finished pattern."""
        if not self.stack:
            raise EmptyPatternError()
        if len(self.stack) > 1:
            raise AmbiguousPatternError()
        return self.stack.pop()