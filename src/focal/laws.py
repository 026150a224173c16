# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Checkers for the lens laws, which any lens must satisfy for composition and
transforms to behave:

  - GetSet: setting the focus to what it already is changes nothing.
  - SetGet: what you set is what you then get.
  - SetSet: setting twice is the same as setting once with the last value.

These are mostly useful when writing a lens by hand (e.g. a FunctionLens or a
Lens subclass), to check it against some sample values in a test:

  check_lens_laws(Person_name, person, "Zeus", "Hera")
"""

import copy

from .debug import d, describe_test
from .exceptions import LensLawException


def check_get_set(lens, whole):
    """set(s, get(s)) == s"""
    result = lens.set(whole, lens.get(whole))
    if result != whole:
        raise LensLawException("GetSet", lens, f"got {result!r}, expected {whole!r}")


def check_set_get(lens, whole, value):
    """get_ref(set(s, a)) == a"""
    got = lens.get_ref(lens.set(whole, value))
    if got != value:
        raise LensLawException("SetGet", lens, f"got {got!r}, expected {value!r}")


def check_set_set(lens, whole, first, second):
    """set(set(s, a1), a2) == set(s, a2)"""
    twice = lens.set(lens.set(whole, first), second)
    once = lens.set(whole, second)
    if twice != once:
        raise LensLawException("SetSet", lens, f"got {twice!r}, expected {once!r}")


def check_lens_laws(lens, whole, first, second):
    """
    Checks all three lens laws for the given lens at the given whole, using
    first and second as replacement values for the focus, and checks that none
    of this modified the whole itself (i.e. that set really returns a new whole).
    """
    describe_test(f"Checking lens laws for {lens}")
    original = copy.deepcopy(whole)

    check_get_set(lens, whole)
    check_set_get(lens, whole, first)
    check_set_get(lens, whole, second)
    check_set_set(lens, whole, first, second)

    if whole != original:
        raise LensLawException(
            "Value semantics", lens, f"set modified its input, now {whole!r}"
        )
    d("Lens laws hold")
