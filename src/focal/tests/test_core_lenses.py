# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

from collections import namedtuple
from dataclasses import dataclass

from pytest import raises

from focal.core_lenses import (
    AttrLens,
    FunctionLens,
    IdentityLens,
    ItemLens,
    attr_path,
    coerce_to_lens,
)
from focal.debug import d
from focal.exceptions import LensCompositionException, NotALensException
from focal.laws import check_lens_laws
from focal.path import LensPath

Point = namedtuple("Point", ["x", "y"])


@dataclass(frozen=True)
class Header:
    count: int
    flags: tuple = ()


@dataclass
class Mutable:
    value: list
    label: str = "m"


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a, b):
        self.a, self.b = a, b

    def __eq__(self, other):
        return (self.a, self.b) == (other.a, other.b)


def test_identity_lens():
    lens = IdentityLens()
    assert lens.get_ref(5) == 5
    assert lens.set(5, 7) == 7
    assert lens.path() == LensPath.empty()
    check_lens_laws(lens, [1, 2], [3], [4, 5])


def test_attr_lens_on_frozen_dataclass():
    header = Header(count=3, flags=("a",))
    lens = AttrLens("count", source=Header, target=int)

    d("GET")
    assert lens.get_ref(header) == 3

    d("SET")
    new_header = lens.set(header, 4)
    assert new_header == Header(count=4, flags=("a",))
    assert new_header is not header
    # The original is untouched and the sibling is carried across as it was.
    assert header.count == 3
    assert new_header.flags is header.flags

    check_lens_laws(lens, header, 10, 20)


def test_attr_lens_on_mutable_dataclass_does_not_mutate():
    original = Mutable(value=[1, 2])
    lens = AttrLens("label")
    updated = lens.set(original, "n")
    assert original.label == "m"
    assert updated.label == "n"
    assert updated.value is original.value


def test_attr_lens_on_namedtuple_and_slots():
    lens = AttrLens("y")
    assert lens.set(Point(1, 2), 5) == Point(1, 5)
    assert isinstance(lens.set(Point(1, 2), 5), Point)

    slotted = Slotted(1, [2])
    lens = AttrLens("a")
    updated = lens.set(slotted, 9)
    assert updated.a == 9 and updated.b is slotted.b
    assert slotted.a == 1


def test_attr_lens_missing_attribute():
    lens = AttrLens("nope")
    with raises(AttributeError):
        lens.get_ref(Header(count=1))
    with raises(AttributeError):
        lens.set(Header(count=1), 2)


def test_item_lens_on_list():
    original = [1, 2, 3]
    lens = ItemLens(1)
    assert lens.get_ref(original) == 2
    assert lens.set(original, 9) == [1, 9, 3]
    assert original == [1, 2, 3]
    assert ItemLens(-1).set(original, 0) == [1, 2, 0]
    check_lens_laws(lens, original, 7, 8)

    with raises(IndexError):
        ItemLens(5).set(original, 0)


def test_item_lens_on_tuples():
    assert ItemLens(0).set((1, 2, 3), 9) == (9, 2, 3)
    assert ItemLens(-1).set((1, 2, 3), 9) == (1, 2, 9)
    updated = ItemLens(1).set(Point(1, 2), 7)
    assert updated == Point(1, 7)
    assert isinstance(updated, Point)
    check_lens_laws(ItemLens(2), (1, 2, 3), 4, 5)


def test_item_lens_on_dict():
    original = {"a": 1, "b": [2]}
    lens = ItemLens("a")
    updated = lens.set(original, 5)
    assert updated == {"a": 5, "b": [2]}
    assert original == {"a": 1, "b": [2]}
    assert updated["b"] is original["b"]
    assert lens.path() == LensPath.new("a")

    with raises(KeyError):
        ItemLens("c").set(original, 1)


def test_function_lens():
    # A hand-written lens over the first element of a pair.
    first = FunctionLens(
        lambda pair: pair[0],
        lambda pair, value: (value, pair[1]),
        path=["first"],
    )
    assert first.get_ref((1, 2)) == 1
    assert first.set((1, 2), 3) == (3, 2)
    assert first.path() == LensPath.new("first")
    check_lens_laws(first, (1, 2), 5, 6)

    # A single string names one path element.
    second = FunctionLens(
        lambda pair: pair[1], lambda pair, value: (pair[0], value), path="second"
    )
    assert second.path() == LensPath.new("second")


def test_attr_path():
    lens = attr_path("address.street")
    assert lens.path() == LensPath.from_pair("address", "street")
    assert attr_path("address", "street").path() == lens.path()
    assert isinstance(attr_path("count"), AttrLens)

    with raises(LensCompositionException):
        attr_path("address..street")
    with raises(LensCompositionException):
        attr_path()


def test_coerce_to_lens():
    assert isinstance(coerce_to_lens("count"), AttrLens)
    assert isinstance(coerce_to_lens(0), ItemLens)
    lens = IdentityLens()
    assert coerce_to_lens(lens) is lens
    with raises(NotALensException):
        coerce_to_lens(1.5)


def test_lens_display():
    assert str(AttrLens("count")) == "AttrLens([count])"
    assert str(AttrLens("count", name="Header_count")) == "AttrLens(Header_count)"
    assert repr(ItemLens(0)) == "ItemLens([0])"
