"""Patterns that match values directly and collect the bound variables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class BoundVariable:
    """A value captured by a variable pattern."""

    value: Any

    def read(self) -> Any:
        return self.value

    def write(self, heap: Any, root: Any) -> Any:
        """The captured value, to be stored in place of ``root``."""
        return self.value


def merge_outputs(a: Any, b: Any) -> Any:
    """Join two match outputs; ``()`` stands for an output that binds nothing."""
    if a == ():
        return b
    if b == ():
        return a
    return (a, (b, ()))


def try_all_match(subpatterns: Sequence[Any], inputs: Sequence[Any], heap: Any) -> Optional[Any]:
    """Match each input with its subpattern; None if any fails."""
    if len(subpatterns) != len(inputs):
        raise ValueError(
            f"{len(subpatterns)} subpatterns for {len(inputs)} inputs"
        )
    outputs = []
    for pattern, t in zip(subpatterns, inputs):
        out = pattern.try_match(t, heap)
        if out is None:
            return None
        outputs.append(out)
    merged: Any = ()
    for out in reversed(outputs):
        merged = merge_outputs(out, merged)
    return merged


@dataclass(frozen=True)
class Literal:
    """Matches when ``predicate(heap, t)`` holds; binds nothing."""

    predicate: Callable[[Any, Any], bool]

    def try_match(self, t: Any, heap: Any) -> Optional[tuple]:
        if not self.predicate(heap, t):
            return None
        return try_all_match((), (), heap)


@dataclass(frozen=True)
class Variable:
    """Matches anything and binds it."""

    def try_match(self, t: Any, heap: Any) -> BoundVariable:
        return BoundVariable(t)


@dataclass(frozen=True)
class Ignored:
    """Matches anything and binds nothing."""

    def try_match(self, t: Any, heap: Any) -> tuple:
        return try_all_match((), (), heap)


@dataclass(frozen=True)
class Composite:
    """Matches when ``deconstruct`` splits the value and every part matches.

    ``deconstruct(t, heap)`` returns the components, or None when ``t`` is
    not built by this constructor.
    """

    deconstruct: Callable[[Any, Any], Optional[Sequence[Any]]]
    subpatterns: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "subpatterns", tuple(self.subpatterns))

    def try_match(self, t: Any, heap: Any) -> Optional[Any]:
        components = self.deconstruct(t, heap)
        if components is None:
            return None
        return try_all_match(self.subpatterns, tuple(components), heap)