"""Embeddings of one language into another."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from langspec.core import LangSpec, Name, SortId, iter_tmf_monomorphizations


@dataclass(frozen=True)
class TmfEndoMapping:
    """Pairs the behavioural form of a mapped type with its structural form."""

    from_extern_behavioral: Any
    to_structural: Any

    def fmap(self, f: Callable[[Any], Any]) -> TmfEndoMapping:
        return TmfEndoMapping(f(self.from_extern_behavioral), f(self.to_structural))


@dataclass
class Sublang:
    """A language ``lsub`` with a map of its sort ids into a larger language."""

    lsub: LangSpec
    map: Callable[[SortId], Any]
    tems: list[TmfEndoMapping] = field(default_factory=list)

    @property
    def name(self) -> Name:
        return self.lsub.name

    def image(self) -> list[Any]:
        """The sort ids of the larger language that ``lsub`` maps onto."""
        return [self.map(sid) for sid in self.lsub.all_sort_ids()]

    def push_through(self, l: LangSpec) -> Sublang:
        """The same sub-language, embedded into ``l`` instead."""
        pushed = l.sublang(self.lsub)
        if pushed is None:
            raise ValueError(
                f"{l.name.human} has no sublanguage {self.lsub.name.human}"
            )
        return pushed


def reflexive_sublang(l: LangSpec) -> Sublang:
    """The identity embedding of a language into itself."""
    return Sublang(
        lsub=l,
        map=lambda sid: sid,
        tems=[TmfEndoMapping(mt, mt) for mt in iter_tmf_monomorphizations(l)],
    )


def images(sublangs: Iterable[Sublang]) -> Iterator[list[Any]]:
    return (s.image() for s in sublangs)


def names(sublangs: Iterable[Sublang]) -> Iterator[Name]:
    return (s.name for s in sublangs)


def kebab(sublangs: Iterable[Sublang], prefix: str) -> str:
    """``prefix`` followed by the kebab-case names of the sub-languages."""
    joined = ""
    for name in names(sublangs):
        part = name.snake.replace("_", "-")
        joined = part if not joined else f"{joined}-{part}"
    return f"{prefix}-{joined}"