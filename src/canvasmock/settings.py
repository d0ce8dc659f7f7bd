# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Process-wide settings for canvasmock."""

from __future__ import annotations

_legacy_shadow_offset_y = False


def get_legacy_shadow_offset_y() -> bool:
    """Return True if ``shadow_offset_y`` shares storage with ``shadow_offset_x``."""
    return _legacy_shadow_offset_y


def set_legacy_shadow_offset_y(enabled: bool) -> bool:
    """Make ``shadow_offset_y`` read and write the X offset slot.

    Some mock implementations of the 2D context store the Y shadow offset in
    the X slot. Enable this to reproduce that behaviour when porting tests
    written against one of them. Events are still recorded as
    ``shadow_offset_y``.

    Returns the previous value, so it can be restored afterwards.
    """
    global _legacy_shadow_offset_y  # pylint: disable=global-statement
    previous = _legacy_shadow_offset_y
    _legacy_shadow_offset_y = bool(enabled)
    return previous


__all__ = ['get_legacy_shadow_offset_y', 'set_legacy_shadow_offset_y']
