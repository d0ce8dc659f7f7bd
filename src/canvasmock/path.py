# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Path construction, shared by the 2D context and :class:`Path2D`.

Segments are recorded as :class:`~canvasmock.recorder.CanvasEvent` objects
that carry the transform active when they were added. Coordinates are not
pre-transformed.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from canvasmock._validation import interface_of, is_finite, numbers, requires
from canvasmock.exceptions import RangeViolationError, TypeMismatchError
from canvasmock.models.matrix import Matrix, is_matrix_like
from canvasmock.recorder import CanvasEvent

log = logging.getLogger(__name__)


class PathMethods:
    """Mixin providing the path construction operations.

    Subclasses supply the transform that new segments carry and decide where
    finished segments go.
    """

    def _path_transform(self) -> Matrix:
        raise NotImplementedError()

    def _add_segment(self, event: CanvasEvent) -> None:
        raise NotImplementedError()

    def _segment(self, type_: str, **props) -> None:
        self._add_segment(CanvasEvent(type_, self._path_transform(), props))

    def _non_finite(self, operation: str, values) -> bool:
        if is_finite(*values):
            return False
        log.debug("%s%r ignored: non-finite argument", operation, tuple(values))
        return True

    def _negative_radius(self, operation: str, what: str, value: float):
        return RangeViolationError(
            operation,
            f'The {what} provided ({value:g}) is negative.',
            interface=interface_of(self),
        )

    @requires(2)
    def move_to(self, x, y):
        """Begin a new subpath at (x, y)."""
        x, y = numbers(x, y)
        if self._non_finite('move_to', (x, y)):
            return
        self._segment('move_to', x=x, y=y)

    @requires(2)
    def line_to(self, x, y):
        """Add a straight line to (x, y)."""
        x, y = numbers(x, y)
        if self._non_finite('line_to', (x, y)):
            return
        self._segment('line_to', x=x, y=y)

    @requires(5)
    def arc(self, x, y, radius, start_angle, end_angle, anticlockwise=False):
        """Add a circular arc centred on (x, y). Angles are in radians."""
        values = numbers(x, y, radius, start_angle, end_angle)
        if self._non_finite('arc', values):
            return
        x, y, radius, start_angle, end_angle = values
        if radius < 0:
            raise self._negative_radius('arc', 'radius', radius)
        self._segment(
            'arc',
            x=x,
            y=y,
            radius=radius,
            start_angle=start_angle,
            end_angle=end_angle,
            anticlockwise=bool(anticlockwise),
        )

    @requires(5)
    def arc_to(self, x1, y1, x2, y2, radius):
        """Add an arc tangent to the lines through the two control points."""
        values = numbers(x1, y1, x2, y2, radius)
        if self._non_finite('arc_to', values):
            return
        x1, y1, x2, y2, radius = values
        if radius < 0:
            raise self._negative_radius('arc_to', 'radius', radius)
        self._segment('arc_to', x1=x1, y1=y1, x2=x2, y2=y2, radius=radius)

    @requires(6)
    def bezier_curve_to(self, cp1x, cp1y, cp2x, cp2y, x, y):
        """Add a cubic Bézier curve ending at (x, y)."""
        values = numbers(cp1x, cp1y, cp2x, cp2y, x, y)
        if self._non_finite('bezier_curve_to', values):
            return
        cp1x, cp1y, cp2x, cp2y, x, y = values
        self._segment(
            'bezier_curve_to', cp1x=cp1x, cp1y=cp1y, cp2x=cp2x, cp2y=cp2y, x=x, y=y
        )

    @requires(4)
    def quadratic_curve_to(self, cpx, cpy, x, y):
        """Add a quadratic Bézier curve ending at (x, y)."""
        values = numbers(cpx, cpy, x, y)
        if self._non_finite('quadratic_curve_to', values):
            return
        cpx, cpy, x, y = values
        self._segment('quadratic_curve_to', cpx=cpx, cpy=cpy, x=x, y=y)

    @requires(7)
    def ellipse(
        self,
        x,
        y,
        radius_x,
        radius_y,
        rotation,
        start_angle,
        end_angle,
        anticlockwise=False,
    ):
        """Add an elliptical arc centred on (x, y)."""
        values = numbers(x, y, radius_x, radius_y, rotation, start_angle, end_angle)
        if self._non_finite('ellipse', values):
            return
        x, y, radius_x, radius_y, rotation, start_angle, end_angle = values
        if radius_x < 0:
            raise self._negative_radius('ellipse', 'major-axis radius', radius_x)
        if radius_y < 0:
            raise self._negative_radius('ellipse', 'minor-axis radius', radius_y)
        self._segment(
            'ellipse',
            x=x,
            y=y,
            radius_x=radius_x,
            radius_y=radius_y,
            rotation=rotation,
            start_angle=start_angle,
            end_angle=end_angle,
            anticlockwise=bool(anticlockwise),
        )

    @requires(4)
    def rect(self, x, y, width, height):
        """Add a closed rectangle subpath."""
        values = numbers(x, y, width, height)
        if self._non_finite('rect', values):
            return
        x, y, width, height = values
        self._segment('rect', x=x, y=y, width=width, height=height)

    def close_path(self):
        """Close the current subpath."""
        self._segment('close_path')


class Path2D(PathMethods):
    """A reusable path, independent of any context.

    Segments added to a Path2D carry the identity transform, or the transform
    given to :meth:`add_path`.
    """

    def __init__(self, path: Path2D | None = None):
        if path is not None and not isinstance(path, Path2D):
            raise TypeMismatchError(
                'constructor',
                "parameter 1 is not of type 'Path2D'.",
                interface='Path2D',
            )
        self._segments: list[CanvasEvent] = []
        if path is not None:
            self._segments.extend(path._segments)

    def _path_transform(self) -> Matrix:
        return Matrix()

    def _add_segment(self, event: CanvasEvent) -> None:
        self._segments.append(event)

    @property
    def segments(self) -> tuple[CanvasEvent, ...]:
        """The recorded segments, as an immutable snapshot."""
        return tuple(self._segments)

    def add_path(self, path: Path2D, transform=None) -> None:
        """Append the segments of another path, optionally transformed."""
        if not isinstance(path, Path2D):
            raise TypeMismatchError(
                'add_path',
                "parameter 1 is not of type 'Path2D'.",
                interface='Path2D',
            )
        if transform is None:
            self._segments.extend(path._segments)
            return
        if not is_matrix_like(transform):
            raise TypeMismatchError(
                'add_path',
                "parameter 2 is not of type 'DOMMatrix2DInit'.",
                interface='Path2D',
            )
        matrix = Matrix(transform)
        self._segments.extend(
            [
                replace(segment, transform=matrix @ segment.transform)
                for segment in path._segments
            ]
        )

    def __len__(self):
        return len(self._segments)

    def __repr__(self):
        return f'<Path2D segments={len(self._segments)}>'
