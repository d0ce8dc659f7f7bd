# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""A recording, validating stand-in for a 2D canvas context, for tests."""

# isort:skip_file

from __future__ import annotations

from canvasmock._version import __version__

from canvasmock.canvas import Canvas, CanvasRenderingContext2D
from canvasmock.enums import (
    CompositeOperation,
    Direction,
    FillRule,
    ImageSmoothingQuality,
    LineCap,
    LineJoin,
    Repetition,
    TextAlign,
    TextBaseline,
)
from canvasmock.exceptions import (
    ArityError,
    CanvasError,
    InvalidEnumError,
    InvalidStateError,
    RangeViolationError,
    TypeMismatchError,
)
from canvasmock.models import (
    CanvasGradient,
    CanvasPattern,
    ImageData,
    ImageSource,
    Matrix,
    SourceKind,
    TextMetrics,
)
from canvasmock.path import Path2D
from canvasmock.recorder import DRAW_CALL_TYPES, CanvasEvent
from canvasmock.state import GraphicsState

from canvasmock import settings
from canvasmock import exceptions

__all__ = [
    '__version__',
    'ArityError',
    'Canvas',
    'CanvasError',
    'CanvasEvent',
    'CanvasGradient',
    'CanvasPattern',
    'CanvasRenderingContext2D',
    'CompositeOperation',
    'Direction',
    'DRAW_CALL_TYPES',
    'exceptions',
    'FillRule',
    'GraphicsState',
    'ImageData',
    'ImageSmoothingQuality',
    'ImageSource',
    'InvalidEnumError',
    'InvalidStateError',
    'LineCap',
    'LineJoin',
    'Matrix',
    'Path2D',
    'RangeViolationError',
    'Repetition',
    'settings',
    'SourceKind',
    'TextAlign',
    'TextBaseline',
    'TextMetrics',
    'TypeMismatchError',
]
