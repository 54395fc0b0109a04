"""Type meta-functions that let a term stand for a pattern over terms."""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Union

from langspec.core import IdentifiedBy, Name, Transparency, TyMetaFuncData, TyMetaFuncSpec


class PatternTmfsId(enum.IntEnum):
    OR_VARIABLE = 0
    OR_VARIABLE_ZERO_OR_MORE = 1
    NAMED_PATTERN = 2


_MATCHED_TY = Name("matched-ty", "MatchedTy", "matched_ty")


@dataclass(frozen=True)
class PatternTmfs(TyMetaFuncSpec):
    """The or-variable, or-variable-zero-or-more and named-pattern meta-functions."""

    def ty_meta_func_data(self, tmf_id: Hashable) -> TyMetaFuncData:
        if tmf_id == PatternTmfsId.OR_VARIABLE:
            return TyMetaFuncData(
                name=Name("or-variable", "OrVariable", "or_variable"),
                args=(_MATCHED_TY,),
                imp="pattern_tmf::OrVariable",
                heapbak="pattern_tmf::OrVariableHeapBak",
                idby=IdentifiedBy.FIRST_TMF_ARG,
                canonical_froms=((0,),),
                size_depends_on=(0,),
                is_collection_of=(),
                transparency=Transparency.VISIBLE,
            )
        if tmf_id == PatternTmfsId.OR_VARIABLE_ZERO_OR_MORE:
            return TyMetaFuncData(
                name=Name(
                    "or-variable-zero-or-more",
                    "OrVariableZeroOrMore",
                    "or_variable_zero_or_more",
                ),
                args=(_MATCHED_TY,),
                imp="pattern_tmf::OrVariableZeroOrMore",
                heapbak="pattern_tmf::OrVariableZeroOrMoreHeapBak",
                idby=IdentifiedBy.FIRST_TMF_ARG,
                canonical_froms=((0,),),
                size_depends_on=(0,),
                is_collection_of=(),
                transparency=Transparency.VISIBLE,
            )
        if tmf_id == PatternTmfsId.NAMED_PATTERN:
            return TyMetaFuncData(
                name=Name("named-pattern", "NamedPattern", "named_pattern"),
                args=(Name("pattern", "Pattern", "pattern"),),
                imp="pattern_tmf::NamedPattern",
                heapbak="pattern_tmf::NamedPatternHeapBak",
                idby=IdentifiedBy.FIRST_TMF_ARG,
                canonical_froms=(),
                size_depends_on=(0,),
                is_collection_of=(),
                transparency=Transparency.VISIBLE,
            )
        raise TypeError(f"not a pattern meta-function id: {tmf_id!r}")


@dataclass(frozen=True)
class Ctor:
    """A concrete term in pattern position."""

    value: Any


@dataclass(frozen=True)
class Var:
    """A variable that binds one term."""

    name: str


@dataclass(frozen=True)
class Ignore:
    """A wildcard."""


@dataclass(frozen=True)
class ZeroOrMoreVar:
    """A variable that binds zero or more terms."""

    name: str


@dataclass(frozen=True)
class NamedPattern:
    """A pattern given a name."""

    pattern: Any
    name: str


OrVariable = Union[Ctor, Var, Ignore]
OrVariableZeroOrMore = Union[Ctor, Var, Ignore, ZeroOrMoreVar]


def ctor_deconstruct_succeeds(value: Any) -> bool:
    """Whether ``value`` holds a concrete term."""
    return isinstance(value, Ctor)


def deconstruct_ctor(value: Any) -> Any:
    """The concrete term inside ``value``; ValueError if it is not a Ctor."""
    if isinstance(value, Ctor):
        return value.value
    raise ValueError(f"not a constructor: {value!r}")