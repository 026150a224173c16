# Copyright (c) 2010-2011, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Main API functions for using focal.
"""

from focal.base_lenses import ComposedLens, Lens, compose, compose_lens
from focal.core_lenses import (
    AttrLens,
    FunctionLens,
    IdentityLens,
    ItemLens,
    attr_path,
    coerce_to_lens,
)
from focal.path import LensPath, LensPathElement
from focal.transforms import (
    Transform,
    compose_tx,
    decrement_tx,
    fn_tx,
    identity_tx,
    increment_tx,
    lens_set,
    mod_tx,
    not_tx,
    set_tx,
)

##################################
# High-level API functions
##################################


def get(lens, whole):
    """
    Reads the focus of the given lens from whole, ensuring that the lens
    parameter is conveniently coerced to an appropriate Lens class.

    Like Lens.get_ref, this returns the focus itself rather than a copy, so it
    must not be modified in place; use Lens.get for an independent copy.

    Example::

      get("address.street", person) -> "123 Needmore Rd"
    """
    return coerce_to_lens(lens).get_ref(whole)


def set(lens, whole, value):
    """
    Returns a copy of whole with the focus of the lens replaced by value.

    Example: set("address.street", person, "666 Titus Ave") -> a new person
    """
    return coerce_to_lens(lens).set(whole, value)


def modify(lens, whole, func):
    """
    Returns a copy of whole with the focus of the lens replaced by
    func(focus).

    Example: modify("age", person, lambda age: age + 1) -> a new, older person
    """
    return coerce_to_lens(lens).modify(whole, func)


__all__ = [
    "AttrLens",
    "ComposedLens",
    "FunctionLens",
    "IdentityLens",
    "ItemLens",
    "Lens",
    "LensPath",
    "LensPathElement",
    "Transform",
    "attr_path",
    "compose",
    "compose_lens",
    "compose_tx",
    "decrement_tx",
    "fn_tx",
    "get",
    "identity_tx",
    "increment_tx",
    "lens_set",
    "mod_tx",
    "modify",
    "not_tx",
    "set",
    "set_tx",
]
