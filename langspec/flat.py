"""Language specs stored as flat, index-addressed tables."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

import yaml

from langspec.core import (
    LangSpec,
    Name,
    SortId,
    TyMetaFuncSpec,
    fmap_sort,
    sort_id_to_data,
)
from langspec.sublang import Sublang, reflexive_sublang

_T = TypeVar("_T")


@dataclass(frozen=True)
class FlatProduct:
    """A product: a name and the sorts of its fields."""

    name: Name
    sorts: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sorts", tuple(self.sorts))


@dataclass(frozen=True)
class FlatSum:
    """A sum: a name and the sorts of its alternatives."""

    name: Name
    sorts: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sorts", tuple(self.sorts))


def _at(seq: Sequence[_T], idx: int, what: str) -> _T:
    if not isinstance(idx, int) or not 0 <= idx < len(seq):
        raise IndexError(f"no {what} with id {idx!r}")
    return seq[idx]


def _name_to_data(name: Name) -> dict:
    return {"human": name.human, "camel": name.camel, "snake": name.snake}


def _tmf_to_data(f: Any) -> Any:
    if isinstance(f, enum.Enum):
        return f.name
    if dataclasses.is_dataclass(f) and not isinstance(f, type):
        return [_tmf_to_data(getattr(f, fld.name)) for fld in dataclasses.fields(f)]
    return f


@dataclass
class LangSpecFlat(LangSpec):
    """A language whose products and sums are addressed by their position."""

    name: Name
    product_defs: list = field(default_factory=list)
    sum_defs: list = field(default_factory=list)
    tmfs: Optional[TyMetaFuncSpec] = field(default=None, compare=False)

    @classmethod
    def empty(cls, name: Name) -> LangSpecFlat:
        """A language with no products and no sums."""
        return cls(name=name)

    @classmethod
    def canonical_from(cls, l: LangSpec) -> LangSpecFlat:
        """Copy any language, ordering products and sums by human name."""
        products_sorted = sorted(l.products(), key=lambda p: l.product_name(p).human)
        sums_sorted = sorted(l.sums(), key=lambda s: l.sum_name(s).human)
        product_index = {pid: idx for idx, pid in reversed(list(enumerate(products_sorted)))}
        sum_index = {sid: idx for idx, sid in reversed(list(enumerate(sums_sorted)))}

        def remap(sid: SortId) -> SortId:
            return fmap_sort(sid, product=product_index.__getitem__, sum=sum_index.__getitem__)

        products = [
            FlatProduct(l.product_name(pid), tuple(remap(s) for s in l.product_sorts(pid)))
            for pid in products_sorted
        ]
        sums = [
            FlatSum(l.sum_name(sid), tuple(remap(s) for s in l.sum_sorts(sid)))
            for sid in sums_sorted
        ]
        return cls(
            name=l.name,
            product_defs=products,
            sum_defs=sums,
            tmfs=getattr(l, "tmfs", None),
        )

    def to_yaml(self) -> str:
        """The language as a YAML document."""

        def entry(item: Any) -> dict:
            return {
                "name": _name_to_data(item.name),
                "sorts": [sort_id_to_data(s, _tmf_to_data) for s in item.sorts],
            }

        data = {
            "name": _name_to_data(self.name),
            "products": [entry(p) for p in self.product_defs],
            "sums": [entry(s) for s in self.sum_defs],
        }
        return yaml.safe_dump(data, sort_keys=False)

    def __str__(self) -> str:
        return self.to_yaml()

    def products(self) -> Iterator[int]:
        return iter(range(len(self.product_defs)))

    def sums(self) -> Iterator[int]:
        return iter(range(len(self.sum_defs)))

    def product_name(self, pid: Hashable) -> Name:
        return _at(self.product_defs, pid, "product").name  # type: ignore[arg-type]

    def sum_name(self, sid: Hashable) -> Name:
        return _at(self.sum_defs, sid, "sum").name  # type: ignore[arg-type]

    def product_sorts(self, pid: Hashable) -> Iterator[SortId]:
        return iter(_at(self.product_defs, pid, "product").sorts)  # type: ignore[arg-type]

    def sum_sorts(self, sid: Hashable) -> Iterator[SortId]:
        return iter(_at(self.sum_defs, sid, "sum").sorts)  # type: ignore[arg-type]

    def sublang(self, lsub: LangSpec) -> Optional[Sublang]:
        """Only a flat language of the same name embeds, as itself."""
        if (
            isinstance(lsub, LangSpecFlat)
            and type(lsub.tmfs) is type(self.tmfs)
            and lsub.name == self.name
        ):
            return reflexive_sublang(self)
        return None