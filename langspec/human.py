"""Language specs addressed by the human-readable names of their sorts."""

from __future__ import annotations

import json
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from langspec.core import LangSpec, Name, SortId, TyMetaFuncSpec, sort_id_from_data
from langspec.sublang import Sublang


@dataclass(frozen=True)
class HumanProduct:
    name: Name
    sorts: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sorts", tuple(self.sorts))


@dataclass(frozen=True)
class HumanSum:
    name: Name
    sorts: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sorts", tuple(self.sorts))


def _name_from_data(data: Any) -> Name:
    try:
        return Name(human=data["human"], camel=data["camel"], snake=data["snake"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed name {data!r}") from exc


@dataclass
class LangSpecHuman(LangSpec):
    """A language whose product and sum ids are their human names."""

    name: Name
    product_defs: list = field(default_factory=list)
    sum_defs: list = field(default_factory=list)
    tmfs: Optional[TyMetaFuncSpec] = field(default=None, compare=False)

    @classmethod
    def from_data(
        cls, data: Any, tmf_from_data: Optional[Callable[[Any], Any]] = None
    ) -> LangSpecHuman:
        """Build from plain data with ``name``, ``products`` and ``sums`` keys."""
        try:
            raw_products = data["products"]
            raw_sums = data["sums"]
            raw_name = data["name"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed language spec: {exc}") from exc

        def items(raw: Any, kind: type) -> list:
            try:
                return [
                    kind(
                        _name_from_data(entry["name"]),
                        tuple(sort_id_from_data(s, tmf_from_data) for s in entry["sorts"]),
                    )
                    for entry in raw
                ]
            except (KeyError, TypeError) as exc:
                raise ValueError(f"malformed entry: {exc}") from exc

        return cls(
            name=_name_from_data(raw_name),
            product_defs=items(raw_products, HumanProduct),
            sum_defs=items(raw_sums, HumanSum),
        )

    @classmethod
    def from_json(
        cls, text: str, tmf_from_data: Optional[Callable[[Any], Any]] = None
    ) -> LangSpecHuman:
        """Build from a JSON document."""
        return cls.from_data(json.loads(text), tmf_from_data)

    def _product(self, pid: Hashable) -> HumanProduct:
        for p in self.product_defs:
            if p.name.human == pid:
                return p
        raise KeyError(pid)

    def _sum(self, sid: Hashable) -> HumanSum:
        for s in self.sum_defs:
            if s.name.human == sid:
                return s
        raise KeyError(sid)

    def products(self) -> Iterator[str]:
        return (p.name.human for p in self.product_defs)

    def sums(self) -> Iterator[str]:
        return (s.name.human for s in self.sum_defs)

    def product_name(self, pid: Hashable) -> Name:
        return self._product(pid).name

    def sum_name(self, sid: Hashable) -> Name:
        return self._sum(sid).name

    def product_sorts(self, pid: Hashable) -> Iterator[SortId]:
        return iter(self._product(pid).sorts)

    def sum_sorts(self, sid: Hashable) -> Iterator[SortId]:
        return iter(self._sum(sid).sorts)

    def sublang(self, lsub: LangSpec) -> Optional[Sublang]:
        """Human-readable specs take part in no embeddings."""
        raise TypeError("human-readable language specs do not support sublanguages")