"""Concrete-syntax wrappers: a parsed value with its location, or a parse error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from langspec.parsing import ParseError, ParseMetadata, SourceSpan


@dataclass(frozen=True)
class Cstfied:
    """A successfully parsed value, with where it came from when known."""

    value: Any
    metadata: Optional[ParseMetadata] = None


@dataclass(frozen=True)
class CstError:
    """A node that failed to parse; holds the error in place of a value."""

    error: ParseError


Cstfy = Union[Cstfied, CstError]


def cstfy_ok(t: Any, start: int, end: int) -> Cstfied:
    """Wrap ``t`` as parsed from the source between offsets ``start`` and ``end``."""
    if end < start:
        raise ValueError(f"end offset {end} lies before start offset {start}")
    return Cstfied(t, ParseMetadata(SourceSpan(start, end - start)))


def cstfy_err(error: ParseError) -> CstError:
    """Wrap a parse error as a failed node."""
    if not isinstance(error, ParseError):
        raise TypeError(f"not a parse error: {error!r}")
    return CstError(error)


def uncstfy(c: Cstfy) -> Any:
    """The parsed value, or None if the node failed to parse."""
    if isinstance(c, Cstfied):
        return c.value
    if isinstance(c, CstError):
        return None
    raise TypeError(f"not a concrete-syntax node: {c!r}")