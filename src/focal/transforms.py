# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Transforms are descriptions of updates to a whole, independent of any
particular instance of it.  Most are built from a lens and a function on the
lens' focus, and any number of them can be chained into one with compose_tx:

  count = Packet_header >> Header_count
  tx = compose_tx(increment_tx(count), mod_tx(count, lambda c: c * 2))
  new_packet = tx.apply(packet)

Nothing happens until apply is called, and apply never modifies its argument:
it returns a new whole, just as Lens.set does.
"""

from typing import Callable, Generic, TypeVar

from .base_lenses import Lens, types_chain
from .debug import IN_DEBUG_MODE, assert_msg, d
from .exceptions import (
    NotALensException,
    NotATransformException,
    TransformCompositionException,
)
from .settings import GlobalSettings
from .util import has_value, type_name

S = TypeVar("S")
A = TypeVar("A")


class Transform(Generic[S]):
    """Base transform, which all other transforms extend."""

    def __init__(self, whole=None, name=None):
        """
        Arguments:

          - whole: The declared type of the whole this transform updates, if
            known, so that transforms over different types are not composed.
          - name: For assigning a name to this transform for debugging purposes.
        """
        self.whole = whole
        self.name = name

    def apply(self, whole: S) -> S:
        """Transforms the whole and returns the new whole."""
        raise NotImplementedError("")

    def __call__(self, whole: S) -> S:
        return self.apply(whole)

    # tx = increment >> double
    def __rshift__(self, other):
        return compose_tx(self, other)

    def _display_id(self):
        if self.name:
            return self.name
        return str(hash(self) % 256)

    def __str__(self):
        return f"{self.__class__.__name__}({self._display_id()})"

    __repr__ = __str__


class IdentityTransform(Transform):
    """Passes the whole through unchanged."""

    def apply(self, whole):
        return whole


class FnTransform(Transform):
    """Applies a plain whole-to-whole function."""

    def __init__(self, func, whole=None, **options):
        super().__init__(whole=whole, **options)
        self.func = func

    def apply(self, whole):
        return self.func(whole)


def _narrower_whole(first, second):
    """
    Returns whichever of two declared wholes the other chains into, i.e. the
    type that both transforms can update, or None if they are unrelated.
    """
    if types_chain(second, first):
        return second
    if types_chain(first, second):
        return first
    return None


class ComposedTransform(Transform):
    """
    Applies its sub-transforms in the order given, each to the output of the
    one before.  As with ComposedLens, nested compositions are flattened.
    """

    def __init__(self, *transforms, name=None):
        self.transforms = []
        for transform in transforms:
            if not isinstance(transform, Transform):
                raise NotATransformException(
                    f"Can compose only transforms, not {transform!r}."
                )
            if transform.__class__ == ComposedTransform:
                self.transforms.extend(transform.transforms)
            else:
                self.transforms.append(transform)
        assert_msg(
            all(t.__class__ != ComposedTransform for t in self.transforms),
            "Nested compositions should have been flattened",
        )

        # The declared wholes must lie on one line of inheritance, and the
        # composite updates the most derived of them.
        whole = None
        for transform in self.transforms:
            if not has_value(transform.whole):
                continue
            if not has_value(whole):
                whole = transform.whole
                continue
            narrower = _narrower_whole(whole, transform.whole)
            if narrower is None and GlobalSettings.check_composition:
                raise TransformCompositionException(
                    "Cannot compose %s (over %s) with transforms over %s"
                    % (transform, type_name(transform.whole), type_name(whole))
                )
            whole = narrower or whole

        super().__init__(whole=whole, name=name)

    def apply(self, whole):
        """Sequential apply of each transform."""
        for transform in self.transforms:
            whole = transform.apply(whole)
            if IN_DEBUG_MODE:
                d(f"{transform} -> {whole!r}")
        return whole


#
# Transforms over the focus of a lens.
#


class LensTransform(Transform):
    """Base of the transforms that update the whole through a lens."""

    def __init__(self, lens, **options):
        if not isinstance(lens, Lens):
            raise NotALensException(f"Expected a lens, not {lens!r}.")
        super().__init__(whole=lens.source, **options)
        self.lens = lens

    def _display_id(self):
        return self.name or str(self.lens)


class LensSetTransform(LensTransform):
    """
    Sets the focus to the output of a function, which is passed the whole
    (rather than the focus) so that it may compute the new focus from anywhere
    within it.
    """

    def __init__(self, lens, func, **options):
        super().__init__(lens, **options)
        self.func = func

    def apply(self, whole):
        return self.lens.set(whole, self.func(whole))


class LensModifyTransform(LensTransform):
    """Replaces the focus with the result of a function of the focus."""

    def __init__(self, lens, func, **options):
        super().__init__(lens, **options)
        self.func = func

    def apply(self, whole):
        return self.lens.modify(whole, self.func)


def successor(value):
    return value + 1


def predecessor(value):
    return value - 1


def negation(value):
    return not value


#
# Transform constructors.
#


def identity_tx(whole=None) -> Transform:
    """The identity transform, which simply passes the whole through."""
    return IdentityTransform(whole=whole)


def fn_tx(func: Callable[[S], S], whole=None) -> Transform[S]:
    """A transform that applies the given function to the whole."""
    return FnTransform(func, whole=whole)


def set_tx(lens: Lens[S, A], func: Callable[[S], A]) -> Transform[S]:
    """
    A transform that invokes a lens set operation with the output of the given
    function, which takes the whole.
    """
    return LensSetTransform(lens, func)


def mod_tx(lens: Lens[S, A], func: Callable[[A], A]) -> Transform[S]:
    """A transform that invokes a lens modify operation with the given function."""
    return LensModifyTransform(lens, func)


def increment_tx(lens: Lens[S, A]) -> Transform[S]:
    """A transform that increments the (usually integral) focus of the lens."""
    return LensModifyTransform(lens, successor)


def decrement_tx(lens: Lens[S, A]) -> Transform[S]:
    """A transform that decrements the (usually integral) focus of the lens."""
    return LensModifyTransform(lens, predecessor)


def not_tx(lens: Lens[S, A]) -> Transform[S]:
    """A transform that negates the boolean focus of the lens."""
    return LensModifyTransform(lens, negation)


def compose_tx(*transforms: Transform[S]) -> Transform[S]:
    """
    Composes transforms into one that applies each in the listed order:

      compose_tx(t1, t2, t3).apply(s) <=> t3.apply(t2.apply(t1.apply(s)))

    Composing no transforms gives the identity transform, and composing one
    gives that transform back.  All the transforms must update the same type of
    whole; where they declare different ones, a TransformCompositionException is
    raised here rather than when the composite is applied.
    """
    for transform in transforms:
        if not isinstance(transform, Transform):
            raise NotATransformException(f"Can compose only transforms, not {transform!r}.")

    if not transforms:
        return identity_tx()
    if len(transforms) == 1:
        return transforms[0]

    composed = ComposedTransform(*transforms)
    d(f"Composed {composed} from {len(composed.transforms)} transform(s)")
    return composed


def lens_set(whole, *updates):
    """
    Provides a shorthand for transforming a whole through a series of lens set
    operations, each given as a (lens, value) pair and applied in order:

      lens_set(person, (Person_name, "Zeus"), (Person_address >> Address_city, "Lima"))

    A callable value is called with the whole as it stands at that step, and
    its result becomes the new focus:

      lens_set(person, (Person_age, lambda p: p.age + 1))

    To store a callable itself as the focus, use set_tx(lens, lambda _: func).
    """
    transforms = []
    for lens, value in updates:
        if callable(value):
            transforms.append(set_tx(lens, value))
        else:
            transforms.append(set_tx(lens, lambda _whole, value=value: value))
    return compose_tx(*transforms).apply(whole)
