# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

from pytest import raises

from focal.path import LensPath, LensPathElement


def test_lens_path_concat():
    p0 = LensPath.from_ids([1, 2, 3])
    p1 = LensPath.from_ids([4, 5])
    assert LensPath.concat(p0, p1) == LensPath.from_ids([1, 2, 3, 4, 5])
    assert p0 + p1 == LensPath.from_ids([1, 2, 3, 4, 5])
    assert LensPath.empty() + p1 == p1


def test_lens_path_display():
    path = LensPath.from_ids([1, 2, 3, 4, 5])
    assert repr(path) == "[1, 2, 3, 4, 5]"
    assert str(LensPath.from_pair("address", "street")) == "[address, street]"
    assert repr(LensPath.empty()) == "[]"


def test_lens_path_constructors():
    assert LensPath.new("name").elements == (LensPathElement("name"),)
    assert LensPath.from_index(3) == LensPath.new(3)
    assert len(LensPath.from_pair("a", "b")) == 2
    assert not LensPath.empty()


def test_lens_path_ordering_and_hashing():
    assert LensPath.from_ids([1, 2]) < LensPath.from_ids([1, 3])
    assert LensPathElement("a") < LensPathElement("b")
    assert len({LensPath.new("a"), LensPath.new("a"), LensPath.new("b")}) == 2


def test_lens_path_element_is_immutable():
    element = LensPathElement("a")
    with raises(AttributeError):
        element.id = "b"
