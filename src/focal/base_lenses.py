# Copyright (c) 2010-2011, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
These lenses form the core of focal.  The Lens class is the base of all other
lenses and ComposedLens chains any number of them end to end.

A lens focuses on a part A (the focus) of a whole S and offers exactly two
primitive operations:

  - get_ref(whole): hand back the focus itself, without copying it.  The caller
    must treat the returned object as borrowed, i.e. must not mutate it.
  - set(whole, focus): return a NEW whole in which the focus is replaced,
    leaving the original whole untouched and carrying every other part of it
    across as it was.

Any lens must satisfy the three lens laws (see focal.laws):

  - GetSet: set(s, get_ref(s)) == s
  - SetGet: get_ref(set(s, a)) == a
  - SetSet: set(set(s, a1), a2) == set(s, a2)

There is no way to mutate a focus in place: every write goes
through set, which rebuilds each ancestor on the path to the focus.
"""

import copy
import types
import typing
from typing import Callable, Generic, TypeVar

from .debug import IN_DEBUG_MODE, assert_msg, d
from .exceptions import LensCompositionException, NotALensException
from .path import LensPath
from .settings import GlobalSettings
from .util import has_value, type_name

S = TypeVar("S")  # The whole.
A = TypeVar("A")  # The focus.
B = TypeVar("B")  # The focus of a lens composed onto this one.

#########################################################
# Base Lens
#########################################################


class Lens(Generic[S, A]):
    """Base lens, which all other lenses extend."""

    def __init__(self, source=None, target=None, name=None):
        """
        Arguments:

          - source: The declared type of the whole this lens focuses into, if
            known.  Used only to reject mismatched compositions early.
          - target: The declared type of the focus, if known.
          - name: For assigning a name to this lens for debugging purposes.
        """
        self.source = source
        self.target = target

        # For debugging purposes, allow a friendly name to be given to the lens,
        # otherwise an automated name will be displayed (e.g. "AttrLens(106)")
        self.name = name

    #
    # Specialised lenses must override these.
    #

    def get_ref(self, whole: S) -> A:
        """Returns the focus of whole, without copying it."""
        raise NotImplementedError("")

    def set(self, whole: S, focus: A) -> S:
        """Returns a copy of whole with its focus replaced by focus."""
        raise NotImplementedError("")

    def path(self) -> LensPath:
        """Describes the focus of this lens relative to its whole."""
        return LensPath.empty()

    #
    # Derived operations.
    #

    def get(self, whole: S) -> A:
        """
        Returns an independent copy of the focus, which the caller is free to
        mutate.
        """
        return copy.deepcopy(self.get_ref(whole))

    def modify(self, whole: S, func: Callable[[A], A]) -> S:
        """
        Returns a copy of whole with its focus replaced by func(focus).

        Depending on GlobalSettings.copy_focus_on_modify, func is handed either
        an independent copy of the focus or the focus itself.
        """
        if GlobalSettings.copy_focus_on_modify:
            focus = self.get(whole)
        else:
            focus = self.get_ref(whole)
        return self.set(whole, func(focus))

    def compose(self, other: "Lens[A, B]") -> "Lens[S, B]":
        """
        Chains other onto the end of this lens, giving a lens from our whole to
        the focus of other.
        """
        return compose(self, other)

    # Transforms that update the focus of this lens.  These import lazily since
    # focal.transforms itself builds on lenses.

    def set_tx(self, func):
        from .transforms import set_tx

        return set_tx(self, func)

    def mod_tx(self, func):
        from .transforms import mod_tx

        return mod_tx(self, func)

    def increment_tx(self):
        from .transforms import increment_tx

        return increment_tx(self)

    def decrement_tx(self):
        from .transforms import decrement_tx

        return decrement_tx(self)

    def not_tx(self):
        from .transforms import not_tx

        return not_tx(self)

    #
    # Operator overloads to make for cleaner lens construction.
    #

    # lens = Person_address >> Address_street
    def __rshift__(self, other):
        return self.compose(other)

    #
    # For debugging
    #

    def _display_id(self):
        """Useful for identifying specific lenses in debug traces."""
        # If we have a specific name, use it.
        if self.name:
            return self.name

        # Otherwise the path is usually the most telling thing about a lens.
        path = self.path()
        if path:
            return repr(path)

        # If no name, a hash with small range gives us a reasonably easy way to
        # distinguish lenses in debug traces.
        return str(hash(self) % 256)

    # String representation.
    def __str__(self):
        # Bolt on the class name, to ease debugging.
        return f"{self.__class__.__name__}({self._display_id()})"

    __repr__ = __str__


#########################################################
# Composition
#########################################################


def _union_members(type_):
    # Optional[X] and X | Y chain member by member.
    if typing.get_origin(type_) in (typing.Union, types.UnionType):
        return typing.get_args(type_)
    return (type_,)


def _single_type_chains(outer_target, inner_source):
    if inner_source is typing.Any or outer_target is typing.Any:
        return True

    # Parameterised generics (e.g. list[int]) are checked by their origin.
    outer_target = typing.get_origin(outer_target) or outer_target
    inner_source = typing.get_origin(inner_source) or inner_source
    try:
        return issubclass(outer_target, inner_source)
    except TypeError:
        # Not classes (e.g. string annotations), so fall back to equality.
        return outer_target == inner_source


def types_chain(outer_target, inner_source):
    """
    Determines whether a lens with focus type outer_target may be composed with
    a lens whose whole is of type inner_source.  Undeclared types always chain.

    Every member of a union focus type must chain into some member of the
    whole type, so Optional[int] chains into int | None but not into
    Optional[str].
    """
    if not (has_value(outer_target) and has_value(inner_source)):
        return True

    inner_members = _union_members(inner_source)
    return all(
        any(_single_type_chains(outer, inner) for inner in inner_members)
        for outer in _union_members(outer_target)
    )


class ComposedLens(Lens[S, A]):
    """
    A lens formed by chaining sub-lenses end to end, each focusing into the
    focus of the one before.

    Nested compositions are flattened into a single chain, so that
    (l1 >> l2) >> l3 and l1 >> (l2 >> l3) are the very same lens.
    """

    def __init__(self, *lenses, name=None):
        if not lenses:
            raise LensCompositionException(
                "Cannot compose zero lenses: start from at least one lens (e.g. IdentityLens())."
            )

        # Flatten sub-lenses that are also compositions, so we don't have too
        # much nesting, which makes debugging lenses a nightmare.
        self.lenses = []
        for lens in lenses:
            if not isinstance(lens, Lens):
                raise NotALensException(f"Can compose only lenses, not {lens!r}.")
            if lens.__class__ == ComposedLens:
                self.lenses.extend(lens.lenses)
            else:
                self.lenses.append(lens)

        if GlobalSettings.check_composition:
            for outer, inner in zip(self.lenses, self.lenses[1:]):
                if not types_chain(outer.target, inner.source):
                    raise LensCompositionException(
                        "Cannot compose %s (focus %s) with %s (whole %s)"
                        % (
                            outer,
                            type_name(outer.target),
                            inner,
                            type_name(inner.source),
                        )
                    )

        super().__init__(
            source=self.lenses[0].source, target=self.lenses[-1].target, name=name
        )
        d(f"Composed {self}")

    def get_ref(self, whole):
        """Sequential get_ref through each lens."""
        focus = whole
        for lens in self.lenses:
            focus = lens.get_ref(focus)
        return focus

    def set(self, whole, focus):
        """
        Reads down to the parent of the focus, remembering each ancestor on the
        way, then rebuilds the ancestors from the innermost outwards.
        """
        ancestors = [whole]
        for lens in self.lenses[:-1]:
            ancestors.append(lens.get_ref(ancestors[-1]))
        assert_msg(
            len(ancestors) == len(self.lenses),
            "Expected one ancestor per lens in the chain",
        )

        new_value = focus
        for lens, ancestor in zip(reversed(self.lenses), reversed(ancestors)):
            new_value = lens.set(ancestor, new_value)

        if IN_DEBUG_MODE:
            d(f"{self} rebuilt {len(ancestors)} level(s)")

        return new_value

    def path(self):
        path = LensPath.empty()
        for lens in self.lenses:
            path = path + lens.path()
        return path


def compose(outer: Lens[S, A], inner: Lens[A, B]) -> Lens[S, B]:
    """
    Composes a Lens[S, A] with a Lens[A, B] to produce a new Lens[S, B].

    Nothing is evaluated: the result is a descriptor only.  Mismatched declared
    types are rejected here, with a LensCompositionException.
    """
    return ComposedLens(outer, inner)


def compose_lens(*lenses: Lens) -> Lens:
    """
    Provides a shorthand for composing a series of lenses, left to right:

      compose_lens(Person_address, Address_street)
    """
    if len(lenses) == 1:
        if not isinstance(lenses[0], Lens):
            raise NotALensException(f"Expected a lens, not {lenses[0]!r}.")
        return lenses[0]
    return ComposedLens(*lenses)
