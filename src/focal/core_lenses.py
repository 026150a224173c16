# Copyright (c) 2010-2011, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

from .base_lenses import ComposedLens, Lens
from .debug import d
from .exceptions import LensCompositionException, NotALensException
from .path import LensPath
from .util import copy_with_attr, copy_with_item


class IdentityLens(Lens):
    """
    Focuses on the whole itself.  Composing with it changes nothing, which makes
    it a handy starting point when building up a lens programmatically.
    """

    def __init__(self, type=None, **options):
        super().__init__(source=type, target=type, **options)

    def get_ref(self, whole):
        return whole

    def set(self, whole, focus):
        return focus


class AttrLens(Lens):
    """
    Focuses on a named attribute of an object, such as a field of a (possibly
    frozen) dataclass, a named tuple or a plain class instance.

    This is the lens one would write per field of a record type:

      Person_name = AttrLens("name", source=Person, target=str)
    """

    def __init__(self, attr_name, source=None, target=None, **options):
        super().__init__(source=source, target=target, **options)
        self.attr_name = attr_name

    def get_ref(self, whole):
        return getattr(whole, self.attr_name)

    def set(self, whole, focus):
        return copy_with_attr(whole, self.attr_name, focus)

    def path(self):
        return LensPath.new(self.attr_name)


class ItemLens(Lens):
    """
    Focuses on a single item of a list, tuple (including named tuples) or
    mapping, by index or key.
    """

    def __init__(self, key, source=None, target=None, **options):
        super().__init__(source=source, target=target, **options)
        self.key = key

    def get_ref(self, whole):
        return whole[self.key]

    def set(self, whole, focus):
        return copy_with_item(whole, self.key, focus)

    def path(self):
        return LensPath.new(self.key)


class FunctionLens(Lens):
    """
    A hand-written lens built from a getter and a setter function.

    The setter is called as setter(whole, focus) and must return a new whole
    rather than modifying the one it is given; it is the caller's
    responsibility that the pair satisfies the lens laws (see focal.laws for
    checking that it does).
    """

    def __init__(self, getter, setter, source=None, target=None, path=None, **options):
        super().__init__(source=source, target=target, **options)
        self.getter = getter
        self.setter = setter
        if isinstance(path, str):
            path = (path,)
        self._path = LensPath(path or ())

    def get_ref(self, whole):
        return self.getter(whole)

    def set(self, whole, focus):
        return self.setter(whole, focus)

    def path(self):
        return self._path


def attr_path(*attr_names, source=None):
    """
    Shorthand for a lens through a path of attributes, either as separate names
    or as a single dotted string:

      attr_path("address", "street") <=> attr_path("address.street")
        <=> AttrLens("address") >> AttrLens("street")

    The source, if given, is declared on the first lens only, since the types
    of the intermediate attributes are not known.
    """
    names = [part for name in attr_names for part in name.split(".")]
    if not names or not all(names):
        raise LensCompositionException(f"Invalid attribute path: {attr_names!r}")

    lenses = [AttrLens(names[0], source=source)]
    lenses.extend(AttrLens(name) for name in names[1:])
    d(f"Attribute path {names}")

    if len(lenses) == 1:
        return lenses[0]
    return ComposedLens(*lenses)


def coerce_to_lens(lens_operand):
    """
    Intelligently converts an operand to a lens, to ease lens definition: an
    attribute path string becomes an attribute lens and an integer becomes an
    item lens.
    """
    if isinstance(lens_operand, str):
        lens_operand = attr_path(lens_operand)
    elif isinstance(lens_operand, int) and not isinstance(lens_operand, bool):
        lens_operand = ItemLens(lens_operand)

    if not isinstance(lens_operand, Lens):
        raise NotALensException(f"Unable to coerce {lens_operand!r} to a lens")
    return lens_operand
