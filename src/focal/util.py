# Copyright (c) 2010, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

import copy
from collections.abc import Mapping


def has_value(var):
    """To avoid possible comparison bugs with empty values vs None."""
    return var is not None


def is_namedtuple(obj):
    return isinstance(obj, tuple) and hasattr(obj, "_fields") and hasattr(obj, "_replace")


def type_name(type_):
    """Short name of a (possibly missing) declared type, for messages."""
    if not has_value(type_):
        return "?"
    return getattr(type_, "__name__", str(type_))


def copy_with_attr(obj, name, value):
    """
    Returns a shallow copy of obj with the attribute name replaced by value,
    leaving obj itself untouched.

    Named tuples are rebuilt with _replace.  Anything else is copied with
    copy.copy and patched with object.__setattr__, which also works for frozen
    dataclasses and classes with __slots__, and means __init__ (and any
    __post_init__) is not re-run: sibling attributes are carried across as they
    are, never recomputed.
    """
    if is_namedtuple(obj):
        return obj._replace(**{name: value})

    # Raise the natural AttributeError for a missing focus, rather than quietly
    # adding a new attribute to the copy.
    getattr(obj, name)

    new_obj = copy.copy(obj)
    object.__setattr__(new_obj, name, value)
    return new_obj


def copy_with_item(obj, key, value):
    """
    Returns a copy of the container obj with the item at key replaced by value,
    leaving obj itself untouched.
    """
    if isinstance(obj, tuple):
        index = normalise_index(obj, key)
        items = obj[:index] + (value,) + obj[index + 1 :]
        if is_namedtuple(obj):
            return obj._make(items)
        return type(obj)(items) if type(obj) is not tuple else items

    if isinstance(obj, Mapping):
        # Again, fail for a missing focus as a get would.
        obj[key]
    else:
        key = normalise_index(obj, key)

    new_obj = copy.copy(obj)
    new_obj[key] = value
    return new_obj


def normalise_index(sequence, index):
    """
    Converts a possibly negative index into its positive equivalent, raising
    IndexError if it is out of range.
    """
    return range(len(sequence))[index]
