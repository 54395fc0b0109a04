"""Names, sort identifiers, type meta-function data and the LangSpec interface."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from itertools import chain
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from langspec.sublang import Sublang


@dataclass(frozen=True, order=True)
class Name:
    """A name in three spellings: human-readable, CamelCase and snake_case."""

    human: str
    camel: str
    snake: str

    def merge(self, other: Name) -> Name:
        """Join this name with another, spelling by spelling."""
        return Name(
            human=f"{self.human}-{other.human}",
            camel=self.camel + other.camel,
            snake=f"{self.snake}_{other.snake}",
        )


class _SortIdOrdering:
    """Total order shared by all sort identifiers (see :func:`sort_key`)."""

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _SortIdOrdering):
            return NotImplemented
        return sort_key(self) < sort_key(other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _SortIdOrdering):
            return NotImplemented
        return sort_key(self) <= sort_key(other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _SortIdOrdering):
            return NotImplemented
        return sort_key(self) > sort_key(other)  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _SortIdOrdering):
            return NotImplemented
        return sort_key(self) >= sort_key(other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ProductSortId(_SortIdOrdering):
    """An algebraic sort that is a product."""

    id: Hashable


@dataclass(frozen=True)
class SumSortId(_SortIdOrdering):
    """An algebraic sort that is a sum."""

    id: Hashable


@dataclass(frozen=True)
class MappedType(_SortIdOrdering):
    """A type meta-function ``f`` applied to argument sorts ``a``."""

    f: Hashable
    a: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", tuple(self.a))


AlgebraicSortId = Union[ProductSortId, SumSortId]
SortId = Union[ProductSortId, SumSortId, MappedType]


def _apply(f: Optional[Callable[[Any], Any]], x: Any) -> Any:
    """Apply ``f`` to ``x``, or leave ``x`` as it is when there is no ``f``."""
    if f is None:
        return x
    return f(x)


def fmap_sort(
    sid: SortId,
    product: Optional[Callable[[Any], Any]] = None,
    sum: Optional[Callable[[Any], Any]] = None,  # noqa: A002
    tmf: Optional[Callable[[Any], Any]] = None,
) -> SortId:
    """Map the product, sum and meta-function ids inside a sort id."""
    if isinstance(sid, ProductSortId):
        return ProductSortId(_apply(product, sid.id))
    if isinstance(sid, SumSortId):
        return SumSortId(_apply(sum, sid.id))
    if isinstance(sid, MappedType):
        return MappedType(
            _apply(tmf, sid.f),
            tuple(fmap_sort(arg, product, sum, tmf) for arg in sid.a),
        )
    raise TypeError(f"not a sort id: {sid!r}")


def project(sid: SortId) -> SortId:
    """Forget every id, keeping only the shape of the sort."""
    return fmap_sort(sid, lambda _: None, lambda _: None, lambda _: None)


def sort_key(sid: SortId) -> tuple:
    """Key ordering algebraic sorts before mapped types, and products before sums."""
    if isinstance(sid, ProductSortId):
        return (0, 0, sid.id)
    if isinstance(sid, SumSortId):
        return (0, 1, sid.id)
    if isinstance(sid, MappedType):
        return (1, sid.f, tuple(sort_key(arg) for arg in sid.a))
    raise TypeError(f"not a sort id: {sid!r}")


def sort_id_to_data(
    sid: SortId, tmf_to_data: Optional[Callable[[Any], Any]] = None
) -> dict:
    """Turn a sort id into plain data in externally tagged form."""
    if isinstance(sid, ProductSortId):
        return {"Algebraic": {"Product": sid.id}}
    if isinstance(sid, SumSortId):
        return {"Algebraic": {"Sum": sid.id}}
    if isinstance(sid, MappedType):
        return {
            "TyMetaFunc": {
                "f": _apply(tmf_to_data, sid.f),
                "a": [sort_id_to_data(arg, tmf_to_data) for arg in sid.a],
            }
        }
    raise TypeError(f"not a sort id: {sid!r}")


def _single_entry(data: Any, what: str) -> tuple[str, Any]:
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"expected a single-key mapping for {what}, got {data!r}")
    return next(iter(data.items()))


def sort_id_from_data(
    data: Any, tmf_from_data: Optional[Callable[[Any], Any]] = None
) -> SortId:
    """Read a sort id back from the form written by :func:`sort_id_to_data`."""
    tag, body = _single_entry(data, "sort id")
    if tag == "Algebraic":
        kind, ident = _single_entry(body, "algebraic sort id")
        if kind == "Product":
            return ProductSortId(ident)
        if kind == "Sum":
            return SumSortId(ident)
        raise ValueError(f"unknown algebraic sort kind {kind!r}")
    if tag == "TyMetaFunc":
        if not isinstance(body, dict) or "f" not in body or "a" not in body:
            raise ValueError(f"malformed mapped type {body!r}")
        return MappedType(
            _apply(tmf_from_data, body["f"]),
            tuple(sort_id_from_data(arg, tmf_from_data) for arg in body["a"]),
        )
    raise ValueError(f"unknown sort id tag {tag!r}")


class LangSpec(ABC):
    """A language: named products and sums whose fields are sorts."""

    name: Name

    @abstractmethod
    def products(self) -> Iterator[Hashable]:
        """Iterate over the product ids."""

    @abstractmethod
    def sums(self) -> Iterator[Hashable]:
        """Iterate over the sum ids."""

    @abstractmethod
    def product_name(self, pid: Hashable) -> Name:
        """Name of a product."""

    @abstractmethod
    def sum_name(self, sid: Hashable) -> Name:
        """Name of a sum."""

    def algebraic_sort_name(self, asid: AlgebraicSortId) -> Name:
        """Name of a product or sum sort."""
        if isinstance(asid, ProductSortId):
            return self.product_name(asid.id)
        if isinstance(asid, SumSortId):
            return self.sum_name(asid.id)
        raise TypeError(f"not an algebraic sort id: {asid!r}")

    @abstractmethod
    def product_sorts(self, pid: Hashable) -> Iterator[SortId]:
        """Sorts of the fields of a product."""

    @abstractmethod
    def sum_sorts(self, sid: Hashable) -> Iterator[SortId]:
        """Sorts of the alternatives of a sum."""

    @abstractmethod
    def sublang(self, lsub: LangSpec) -> Optional[Sublang]:
        """The embedding of ``lsub`` into this language, if there is one."""

    def tmf_roots(self) -> Iterator[MappedType]:
        """Mapped types that belong to the language without appearing in a field."""
        return iter(())

    def all_sort_ids(self) -> Iterator[SortId]:
        """Every product, then every sum, then every mapped type in use."""
        yield from (ProductSortId(pid) for pid in self.products())
        yield from (SumSortId(sid) for sid in self.sums())
        yield from list(iter_tmf_monomorphizations(self))


def iter_tmf_monomorphizations(l: LangSpec) -> Iterator[MappedType]:
    """Yield each distinct mapped type reachable from the language, depth first."""
    found: set[MappedType] = set()

    def process(sort: SortId) -> Iterator[MappedType]:
        if not isinstance(sort, MappedType) or sort in found:
            return
        found.add(sort)
        yield sort
        for arg in sort.a:
            yield from process(arg)

    roots: Iterable[SortId] = chain(
        (s for pid in l.products() for s in l.product_sorts(pid)),
        (s for sid in l.sums() for s in l.sum_sorts(sid)),
        l.tmf_roots(),
    )
    for sort in roots:
        yield from process(sort)


class Transparency(enum.Enum):
    """Whether a meta-function shows up in concrete syntax."""

    TRANSPARENT = "transparent"
    VISIBLE = "visible"


class IdentifiedBy(enum.Enum):
    """What identifies an instance of a meta-function."""

    TMF = "tmf"
    FIRST_TMF_ARG = "first_tmf_arg"


@dataclass(frozen=True)
class TyMetaFuncData:
    """Description of a type meta-function; ``imp`` and ``heapbak`` are type paths."""

    name: Name
    args: tuple[Name, ...]
    imp: str
    heapbak: str
    idby: IdentifiedBy
    canonical_froms: tuple[tuple[int, ...], ...]
    size_depends_on: tuple[int, ...]
    is_collection_of: tuple[int, ...]
    transparency: Transparency


class TyMetaFuncSpec(ABC):
    """A family of type meta-functions, keyed by their ids."""

    @abstractmethod
    def ty_meta_func_data(self, tmf_id: Hashable) -> TyMetaFuncData:
        """Data describing the meta-function with the given id."""