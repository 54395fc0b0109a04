import pytest

from langspec.core import (
    LangSpec,
    MappedType,
    Name,
    ProductSortId,
    SumSortId,
    fmap_sort,
    iter_tmf_monomorphizations,
)
from langspec.sublang import (
    Sublang,
    TmfEndoMapping,
    images,
    kebab,
    names,
    reflexive_sublang,
)


class _Lang(LangSpec):
    def __init__(self, name, products, sums, inner=None):
        self.name = name
        self._products = products
        self._sums = sums
        self._inner = inner

    def products(self):
        return iter(self._products)

    def sums(self):
        return iter(self._sums)

    def product_name(self, pid):
        return Name(pid, pid, pid)

    def sum_name(self, sid):
        return Name(sid, sid, sid)

    def product_sorts(self, pid):
        return iter(self._products[pid])

    def sum_sorts(self, sid):
        return iter(self._sums[sid])

    def sublang(self, lsub):
        if lsub is self:
            return reflexive_sublang(self)
        if lsub is self._inner:
            return Sublang(lsub, lambda sid: fmap_sort(sid, tmf=lambda f: ("outer", f)))
        return None


SET_NAT = MappedType("set", (ProductSortId("nat"),))


def _inner():
    return _Lang(Name("foo", "Foo", "foo_bar"), {"nat": [], "p": [SET_NAT]}, {"s": [ProductSortId("p")]})


def test_reflexive_image_is_all_sort_ids():
    l = _inner()
    assert reflexive_sublang(l).image() == list(l.all_sort_ids())


def test_reflexive_tems():
    l = _inner()
    tems = reflexive_sublang(l).tems
    assert [t.from_extern_behavioral for t in tems] == list(iter_tmf_monomorphizations(l))
    assert all(t.from_extern_behavioral == t.to_structural for t in tems)


def test_tem_fmap():
    tem = TmfEndoMapping(ProductSortId(1), SumSortId(2)).fmap(lambda s: fmap_sort(s, str, str))
    assert tem == TmfEndoMapping(ProductSortId("1"), SumSortId("2"))


def test_push_through():
    inner = _inner()
    outer = _Lang(Name("big", "Big", "big"), {}, {}, inner=inner)
    pushed = reflexive_sublang(inner).push_through(outer)
    assert pushed.lsub is inner
    assert MappedType(("outer", "set"), (ProductSortId("nat"),)) in pushed.image()


def test_push_through_missing():
    inner = _inner()
    other = _Lang(Name("o", "O", "o"), {}, {})
    with pytest.raises(ValueError):
        reflexive_sublang(inner).push_through(other)


def test_images_and_names():
    a = _inner()
    b = _Lang(Name("baz", "Baz", "baz"), {"q": []}, {})
    subs = [reflexive_sublang(a), reflexive_sublang(b)]
    assert list(names(subs)) == [a.name, b.name]
    assert list(images(subs)) == [list(a.all_sort_ids()), list(b.all_sort_ids())]


def test_kebab():
    a = _inner()
    b = _Lang(Name("baz", "Baz", "baz"), {}, {})
    assert kebab([reflexive_sublang(a), reflexive_sublang(b)], "bridge") == "bridge-foo-bar-baz"
    assert kebab([], "bridge") == "bridge-"