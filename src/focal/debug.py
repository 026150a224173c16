# Copyright (c) 2010-2011, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause

"""
Debug tracing for focal, routed through the standard logging module.

Tracing is switched on by setting the FOCAL_DEBUG environment variable, in
which case messages from d() are written to stderr, indented according to how
deeply nested the current lens or transform call is.
"""

import inspect
import logging
import os

logger = logging.getLogger("focal")
logger.addHandler(logging.NullHandler())

IN_DEBUG_MODE = bool(os.environ.get("FOCAL_DEBUG"))

# Frame names that mark one level of lens or transform nesting.
TRACED_FUNCTION_NAMES = ["get_ref", "set", "apply"]


def debug_indent():
    """
    Nicely indents the debug messages according to the hierarchy of lenses
    and transforms currently being evaluated.
    """
    function_names = []
    caller_frame = inspect.currentframe()
    while caller_frame:
        function_names.append(caller_frame.f_code.co_name)
        caller_frame = caller_frame.f_back

    indent = 0
    for name in TRACED_FUNCTION_NAMES:
        indent += function_names.count(name)
    indent -= 1

    return " " * max(0, indent)


def d(msg):
    """Emit a debug message, if tracing is enabled."""
    if IN_DEBUG_MODE:
        logger.debug(debug_indent() + str(msg))


# Messages go to stderr when tracing is switched on.
if IN_DEBUG_MODE:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG)


# Internal invariant check, with an explanation for when it fails.
def assert_msg(condition, msg=None):
    assert condition, msg or ""


def describe_test(msg):
    """A debug message that will stand out."""
    msg = "========= " + msg + " ========="
    return d(msg)


def auto_name_lenses(local_variables):
    """
    Gives names to lenses and transforms based on their local variable names,
    which is useful for tracing. Should be called with globals()/locals()
    """
    from focal.base_lenses import Lens
    from focal.transforms import Transform

    for variable_name, obj in local_variables.items():
        if isinstance(obj, (Lens, Transform)):
            obj.name = variable_name
