# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Enumerated string values accepted by the 2D context.

Members are ``str`` subclasses, so callers may pass either ``FillRule.EVENODD``
or the plain string ``'evenodd'``. The context always stores and records the
plain string value.
"""

from __future__ import annotations

from enum import Enum


class FillRule(str, Enum):
    """Winding rule used by fill, clip and hit testing."""

    NONZERO = 'nonzero'
    EVENODD = 'evenodd'


class LineCap(str, Enum):
    BUTT = 'butt'
    ROUND = 'round'
    SQUARE = 'square'


class LineJoin(str, Enum):
    ROUND = 'round'
    BEVEL = 'bevel'
    MITER = 'miter'


class TextAlign(str, Enum):
    LEFT = 'left'
    RIGHT = 'right'
    CENTER = 'center'
    START = 'start'
    END = 'end'


class TextBaseline(str, Enum):
    TOP = 'top'
    HANGING = 'hanging'
    MIDDLE = 'middle'
    ALPHABETIC = 'alphabetic'
    IDEOGRAPHIC = 'ideographic'
    BOTTOM = 'bottom'


class Direction(str, Enum):
    """Text direction."""

    LTR = 'ltr'
    """Left to right."""
    RTL = 'rtl'
    """Right to left, Arabic, Hebrew, Persian, etc."""
    INHERIT = 'inherit'
    """Inherit from the canvas element, the default."""


class ImageSmoothingQuality(str, Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


class Repetition(str, Enum):
    """Tiling mode of a pattern."""

    REPEAT = 'repeat'
    REPEAT_X = 'repeat-x'
    REPEAT_Y = 'repeat-y'
    NO_REPEAT = 'no-repeat'


class CompositeOperation(str, Enum):
    """Compositing and blend modes for ``global_composite_operation``."""

    SOURCE_OVER = 'source-over'
    SOURCE_IN = 'source-in'
    SOURCE_OUT = 'source-out'
    SOURCE_ATOP = 'source-atop'
    DESTINATION_OVER = 'destination-over'
    DESTINATION_IN = 'destination-in'
    DESTINATION_OUT = 'destination-out'
    DESTINATION_ATOP = 'destination-atop'
    LIGHTER = 'lighter'
    COPY = 'copy'
    XOR = 'xor'
    MULTIPLY = 'multiply'
    SCREEN = 'screen'
    OVERLAY = 'overlay'
    DARKEN = 'darken'
    LIGHTEN = 'lighten'
    COLOR_DODGE = 'color-dodge'
    COLOR_BURN = 'color-burn'
    HARD_LIGHT = 'hard-light'
    SOFT_LIGHT = 'soft-light'
    DIFFERENCE = 'difference'
    EXCLUSION = 'exclusion'
    HUE = 'hue'
    SATURATION = 'saturation'
    COLOR = 'color'
    LUMINOSITY = 'luminosity'


__all__ = [
    'CompositeOperation',
    'Direction',
    'FillRule',
    'ImageSmoothingQuality',
    'LineCap',
    'LineJoin',
    'Repetition',
    'TextAlign',
    'TextBaseline',
]
