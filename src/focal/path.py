# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Lens paths describe where a lens focuses relative to its whole, as the
sequence of attribute names, keys and indices it walks through.  They are
purely descriptive: two lenses with equal paths over the same type focus on the
same part, which is handy for debugging and for keying caches of lenses.
"""

from functools import total_ordering


@total_ordering
class LensPathElement:
    """An element in a LensPath: an attribute name, a key or an index."""

    __slots__ = ("id",)

    def __init__(self, id):
        object.__setattr__(self, "id", id)

    def __setattr__(self, name, value):
        raise AttributeError("LensPathElement is immutable")

    def __eq__(self, other):
        if not isinstance(other, LensPathElement):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other):
        if not isinstance(other, LensPathElement):
            return NotImplemented
        # Elements of differing kinds (e.g. str vs int) are ordered by kind first.
        return (type(self.id).__name__, self.id) < (type(other.id).__name__, other.id)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"LensPathElement({self.id!r})"

    def __str__(self):
        return str(self.id)


class LensPath(tuple):
    """Describes a lens relative to a source data structure."""

    def __new__(cls, elements=()):
        return super().__new__(
            cls,
            (e if isinstance(e, LensPathElement) else LensPathElement(e) for e in elements),
        )

    @property
    def elements(self):
        return tuple(self)

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def new(cls, id):
        """A path with a single element."""
        return cls((id,))

    @classmethod
    def from_index(cls, index):
        """A path with a single index (for an indexed type such as list)."""
        return cls((int(index),))

    @classmethod
    def from_pair(cls, id0, id1):
        return cls((id0, id1))

    @classmethod
    def from_ids(cls, ids):
        return cls(ids)

    @classmethod
    def concat(cls, lhs, rhs):
        """A new path that is the concatenation of the two paths."""
        return cls(tuple(lhs) + tuple(rhs))

    def __add__(self, other):
        if not isinstance(other, LensPath):
            return NotImplemented
        return LensPath.concat(self, other)

    def __repr__(self):
        return "[{}]".format(", ".join(str(e) for e in self))

    __str__ = __repr__
