"""A language whose field sorts are rewritten by a context-aware sort map."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from langspec.core import (
    AlgebraicSortId,
    LangSpec,
    MappedType,
    Name,
    ProductSortId,
    SortId,
    SumSortId,
    fmap_sort,
)
from langspec.sublang import Sublang, reflexive_sublang


class _Either:
    """Orders every Left before every Right, then by value."""

    __slots__ = ()
    _rank = 0

    def _key(self) -> tuple:
        return (self._rank, self.value)  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Either):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _Either):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _Either):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _Either):
            return NotImplemented
        return self._key() >= other._key()


@dataclass(frozen=True)
class Left(_Either):
    """A meta-function id from the underlying language."""

    value: Any
    _rank = 0


@dataclass(frozen=True)
class Right(_Either):
    """A meta-function id introduced by the sort map."""

    value: Any
    _rank = 1


def embed_sort_id(sid: SortId) -> SortId:
    """Lift a sort id of the underlying language, tagging its meta-functions Left."""
    return fmap_sort(sid, tmf=Left)


class ContextualSortMap(ABC):
    """Rewrites a field sort, knowing which product or sum it belongs to."""

    @abstractmethod
    def map(self, l: LangSpec, ctx: AlgebraicSortId, sid: SortId) -> SortId:
        """The replacement for ``sid`` inside ``ctx`` of ``l``."""


@dataclass
class LsSortMapped(LangSpec):
    """The language ``l`` renamed, with its field sorts passed through ``csm``."""

    l: LangSpec
    name: Name
    csm: ContextualSortMap

    def products(self) -> Iterator[Hashable]:
        return self.l.products()

    def sums(self) -> Iterator[Hashable]:
        return self.l.sums()

    def product_name(self, pid: Hashable) -> Name:
        return self.l.product_name(pid)

    def sum_name(self, sid: Hashable) -> Name:
        return self.l.sum_name(sid)

    def product_sorts(self, pid: Hashable) -> Iterator[SortId]:
        ctx = ProductSortId(pid)
        return (self.csm.map(self.l, ctx, s) for s in self.l.product_sorts(pid))

    def sum_sorts(self, sid: Hashable) -> Iterator[SortId]:
        ctx = SumSortId(sid)
        return (self.csm.map(self.l, ctx, s) for s in self.l.sum_sorts(sid))

    def tmf_roots(self) -> Iterator[MappedType]:
        return (embed_sort_id(mt) for mt in self.l.tmf_roots())  # type: ignore[misc]

    def sublang(self, lsub: LangSpec) -> Optional[Sublang]:
        """Itself first, else whatever the underlying language embeds, lifted."""
        if (
            isinstance(lsub, LsSortMapped)
            and type(lsub.l) is type(self.l)
            and type(lsub.csm) is type(self.csm)
            and lsub.name == self.name
        ):
            return reflexive_sublang(self)
        inner = self.l.sublang(lsub)
        if inner is None:
            return None
        inner_map = inner.map
        return Sublang(
            lsub=inner.lsub,
            map=lambda sid: embed_sort_id(inner_map(sid)),
            tems=[tem.fmap(embed_sort_id) for tem in inner.tems],
        )