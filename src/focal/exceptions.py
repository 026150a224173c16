# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

from .debug import IN_DEBUG_MODE, d


class LensException(Exception):
    """
    Base of all exceptions raised by focal itself.

    Note that errors raised from within user data (e.g. an AttributeError when a
    lens is applied to a value that lacks the focused attribute) or from within
    user-supplied functions are never wrapped: they propagate unchanged.
    """

    def __init__(self, msg=None):
        super().__init__(msg)
        self.__msg = msg
        if IN_DEBUG_MODE:
            d(f"Throwing: {self}")

    @property
    def msg(self):
        return self.__msg

    def __str__(self):
        return f"{self.__class__.__name__}: {self.__msg}"


# Thrown when building a lens or transform that could never be applied
# correctly.  These are always raised at construction time, before any value
# exists to operate on, never from get_ref, set or apply.
class CompositionException(LensException):
    pass


class LensCompositionException(CompositionException):
    pass


class TransformCompositionException(CompositionException):
    pass


class NotALensException(CompositionException):
    pass


class NotATransformException(CompositionException):
    pass


# Thrown by the checkers in focal.laws.
class LensLawException(LensException):
    def __init__(self, law, lens, msg=None):
        self.law = law
        self.lens = lens
        super().__init__(f"{law} law violated by {lens}" + (f": {msg}" if msg else ""))
