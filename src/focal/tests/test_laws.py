# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

from pytest import raises

from focal.core_lenses import FunctionLens, ItemLens
from focal.exceptions import LensException, LensLawException
from focal.laws import check_get_set, check_lens_laws, check_set_get, check_set_set


def test_lawful_lens():
    check_lens_laws(ItemLens("x"), {"x": 1, "y": 2}, 3, 4)


def test_set_get_violation():
    # A setter that ignores the value it is given.
    lens = FunctionLens(lambda s: s["x"], lambda s, a: dict(s))
    check_get_set(lens, {"x": 1})
    with raises(LensLawException) as exc_info:
        check_set_get(lens, {"x": 1}, 2)
    assert exc_info.value.law == "SetGet"
    assert exc_info.value.lens is lens
    assert "SetGet law violated" in str(exc_info.value)


def test_get_set_violation():
    # A setter that also bumps a sibling.
    lens = FunctionLens(lambda s: s["x"], lambda s, a: {**s, "x": a, "n": s["n"] + 1})
    with raises(LensLawException) as exc_info:
        check_lens_laws(lens, {"x": 1, "n": 0}, 2, 3)
    assert exc_info.value.law == "GetSet"


def test_set_set_violation():
    # A setter that accumulates history rather than replacing.
    lens = FunctionLens(
        lambda s: s["log"][-1],
        lambda s, a: {**s, "log": s["log"] + [a]},
    )
    check_set_get(lens, {"log": [0]}, 1)
    with raises(LensLawException) as exc_info:
        check_set_set(lens, {"log": [0]}, 1, 2)
    assert exc_info.value.law == "SetSet"


def test_mutating_setter_is_caught():
    def setter(s, a):
        s["x"] = a
        return s

    lens = FunctionLens(lambda s: s["x"], setter)
    with raises(LensException) as exc_info:
        check_lens_laws(lens, {"x": 1}, 2, 3)
    assert exc_info.value.law == "Value semantics"
