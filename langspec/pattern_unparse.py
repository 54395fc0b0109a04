"""Writing pattern meta-function values back out as concrete syntax."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from langspec.pattern_tmf import Ctor, Ignore, NamedPattern, Var, ZeroOrMoreVar


@dataclass
class Unparse:
    """Collects the words of concrete syntax in order."""

    pieces: list = field(default_factory=list)

    def static_text(self, text: str) -> None:
        """Append a fixed piece of syntax such as a keyword or symbol."""
        self.pieces.append(text)

    def dynamic_text(self, text: str) -> None:
        """Append text taken from the value, such as a name."""
        self.pieces.append(text)

    def text(self) -> str:
        """The collected pieces, separated by single spaces."""
        return " ".join(self.pieces)


UnparseFn = Callable[[Unparse, Any], None]


def unparse_or_variable(out: Unparse, value: Any, unparse_matched: UnparseFn) -> None:
    """Write a variable, a wildcard, or a term via ``unparse_matched``."""
    if isinstance(value, Ctor):
        unparse_matched(out, value.value)
    elif isinstance(value, Var):
        out.static_text("$")
        out.dynamic_text(value.name)
    elif isinstance(value, Ignore):
        out.static_text("_")
    else:
        raise TypeError(f"not an or-variable: {value!r}")


def unparse_or_variable_zero_or_more(
    out: Unparse, value: Any, unparse_matched: UnparseFn
) -> None:
    """Like :func:`unparse_or_variable`, also writing zero-or-more variables."""
    if isinstance(value, ZeroOrMoreVar):
        out.static_text("...")
        out.dynamic_text(value.name)
    else:
        unparse_or_variable(out, value, unparse_matched)


def unparse_named_pattern(out: Unparse, value: NamedPattern, unparse_pattern: UnparseFn) -> None:
    """Write ``@ name = pattern``."""
    if not isinstance(value, NamedPattern):
        raise TypeError(f"not a named pattern: {value!r}")
    out.static_text("@")
    out.dynamic_text(value.name)
    out.static_text("=")
    unparse_pattern(out, value.pattern)