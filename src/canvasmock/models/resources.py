# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Gradient, pattern and text metrics handles returned by the context.

These are plain value objects. None of them refers back to the context that
created it.
"""

from __future__ import annotations

from dataclasses import dataclass

from canvasmock._validation import is_finite, to_number
from canvasmock.colors import normalize_color
from canvasmock.exceptions import (
    ArityError,
    RangeViolationError,
    TypeMismatchError,
)
from canvasmock.models.matrix import Matrix, is_matrix_like


class CanvasGradient:
    """A linear or radial gradient.

    ``kind`` is ``'linear'`` or ``'radial'`` and ``geometry`` holds the
    coerced arguments it was created with.
    """

    def __init__(self, kind: str, **geometry: float):
        self.kind = kind
        self.geometry = dict(geometry)
        self._stops: list[tuple[float, str]] = []

    def add_color_stop(self, *args) -> None:
        """Add a color stop at *offset*, between 0 and 1."""
        if len(args) < 2:
            raise ArityError(
                'add_color_stop', 2, len(args), interface='CanvasGradient'
            )
        offset, color = to_number(args[0]), args[1]
        if not is_finite(offset):
            raise TypeMismatchError(
                'add_color_stop',
                'The provided double value is non-finite.',
                interface='CanvasGradient',
            )
        if not 0 <= offset <= 1:
            raise RangeViolationError(
                'add_color_stop',
                f'The provided value ({args[0]}) is outside the range (0.0, 1.0).',
                interface='CanvasGradient',
            )
        normalized = normalize_color(color)
        if normalized is None:
            raise TypeMismatchError(
                'add_color_stop',
                f"The value provided ('{color}') could not be parsed as a color.",
                interface='CanvasGradient',
            )
        self._stops.append((offset, normalized))

    @property
    def color_stops(self) -> list[tuple[float, str]]:
        """Color stops in the order they were added."""
        return list(self._stops)

    def __repr__(self):
        return f'<CanvasGradient {self.kind} stops={len(self._stops)}>'


class CanvasPattern:
    """A repeating image pattern."""

    def __init__(self, repetition: str = 'repeat'):
        self.repetition = repetition
        self.transform = Matrix()

    def set_transform(self, matrix=None) -> None:
        """Set the pattern's own transform; no argument resets it."""
        if matrix is None:
            self.transform = Matrix()
            return
        if not is_matrix_like(matrix):
            raise TypeMismatchError(
                'set_transform',
                "parameter 1 is not of type 'DOMMatrix2DInit'.",
                interface='CanvasPattern',
            )
        self.transform = Matrix(matrix)

    def __repr__(self):
        return f'<CanvasPattern {self.repetition}>'


@dataclass(frozen=True)
class TextMetrics:
    """Text measurement result.

    No font is loaded, so the width is the number of characters in the text
    and the bounding box values are zero.
    """

    text: str
    width: float
    actual_bounding_box_left: float = 0.0
    actual_bounding_box_right: float = 0.0
    actual_bounding_box_ascent: float = 0.0
    actual_bounding_box_descent: float = 0.0
    font_bounding_box_ascent: float = 0.0
    font_bounding_box_descent: float = 0.0

    @classmethod
    def for_text(cls, text: str) -> TextMetrics:
        return cls(text=text, width=float(len(text)))
