# Copyright (c) 2010-2011, Nick Blundell
# Copyright (c) 2023-2024, Abilian SAS
#
# SPDX-License-Identifier: BSD-3-Clause


class GlobalSettings:
    """
    These are some global settings that affect the functionality of the
    framework.
    """

    """
    Check, when lenses or transforms are composed, that their declared types
    line up (e.g. that the target of an outer lens is a source of the inner
    lens), rejecting the composition there and then.  Lenses and transforms
    without declared types are never checked.
    """
    check_composition = True

    """
    Pass an independent (deep) copy of the focus to the function given to
    mod_tx and Lens.modify, so that the function may freely mutate the value it
    is handed without touching the original whole.  Set to False if your
    update functions are known to be pure and copying is too costly.
    """
    copy_focus_on_modify = True
