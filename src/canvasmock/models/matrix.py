# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Affine transformation matrices for the 2D context."""

from __future__ import annotations

from math import cos, isfinite, sin

_FIELDS = ('a', 'b', 'c', 'd', 'e', 'f')


def is_matrix_like(obj) -> bool:
    """True if *obj* exposes the six numeric fields ``a`` to ``f``."""
    if isinstance(obj, Matrix):
        return True
    try:
        return all(
            isinstance(getattr(obj, name), (int, float))
            and not isinstance(getattr(obj, name), bool)
            for name in _FIELDS
        )
    except AttributeError:
        return False


class Matrix:
    """A 2D affine transform.

    Canvas matrices are 3x3 matrices summarized by the shorthand
    ``(a, b, c, d, e, f)``, laid out for column vectors::

        | a  c  e |
        | b  d  f |
        | 0  0  1 |

    A point ``(x, y)`` maps to ``(a*x + c*y + e, b*x + d*y + f)``.

    ``m @ n`` is the composition ``m ∘ n``: ``n`` is applied to a point first,
    then ``m``. Every context transform operation concatenates onto the right
    of the current matrix, so the new operation acts in the local coordinate
    space set up by the earlier ones.

    Matrix objects are immutable. All transformations on them produce a new
    matrix.
    """

    __slots__ = ('_values',)

    def __init__(self, *args):
        if not args:
            values = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        elif len(args) == 6:
            values = tuple(float(v) for v in args)
        elif len(args) == 1 and is_matrix_like(args[0]):
            values = tuple(float(getattr(args[0], name)) for name in _FIELDS)
        elif len(args) == 1 and len(args[0]) == 6:
            values = tuple(float(v) for v in args[0])
        else:
            raise ValueError('Matrix requires 0 or 6 numbers, or one matrix-like')
        self._values = values

    @staticmethod
    def identity() -> Matrix:
        """Construct and return an identity matrix."""
        return Matrix()

    @property
    def shorthand(self) -> tuple[float, float, float, float, float, float]:
        """Return the 6-tuple ``(a, b, c, d, e, f)`` that describes this matrix."""
        return self._values

    @property
    def a(self) -> float:
        return self._values[0]

    @property
    def b(self) -> float:
        return self._values[1]

    @property
    def c(self) -> float:
        return self._values[2]

    @property
    def d(self) -> float:
        return self._values[3]

    @property
    def e(self) -> float:
        return self._values[4]

    @property
    def f(self) -> float:
        return self._values[5]

    @property
    def is_identity(self) -> bool:
        return self._values == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @property
    def is_finite(self) -> bool:
        return all(isfinite(v) for v in self._values)

    def __matmul__(self, other: Matrix) -> Matrix:
        """Compose this matrix with another; *other* is applied first."""
        if not isinstance(other, Matrix):
            return NotImplemented
        a, b, c, d, e, f = self._values
        oa, ob, oc, od, oe, of = other._values
        return Matrix(
            a * oa + c * ob,
            b * oa + d * ob,
            a * oc + c * od,
            b * oc + d * od,
            a * oe + c * of + e,
            b * oe + d * of + f,
        )

    def translated(self, x: float, y: float) -> Matrix:
        """Concatenate a translation in local coordinates."""
        a, b, c, d, e, f = self._values
        return Matrix(a, b, c, d, e + a * x + c * y, f + b * x + d * y)

    def scaled(self, x: float, y: float) -> Matrix:
        """Concatenate a scaling in local coordinates."""
        a, b, c, d, e, f = self._values
        return Matrix(a * x, b * x, c * y, d * y, e, f)

    def rotated(self, angle: float) -> Matrix:
        """Concatenate a rotation of *angle* radians.

        On a y-down drawing surface positive angles turn clockwise.
        """
        a, b, c, d, e, f = self._values
        cs, sn = cos(angle), sin(angle)
        return Matrix(
            a * cs + c * sn,
            b * cs + d * sn,
            c * cs - a * sn,
            d * cs - b * sn,
            e,
            f,
        )

    def inverse(self) -> Matrix:
        """Return the inverse matrix.

        Raises:
            ValueError: if the matrix is singular.
        """
        a, b, c, d, e, f = self._values
        det = a * d - b * c
        if det == 0:
            raise ValueError('Matrix is not invertible')
        return Matrix(
            d / det,
            -b / det,
            -c / det,
            a / det,
            (c * f - d * e) / det,
            (b * e - a * f) / det,
        )

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        """Map a point through this matrix."""
        a, b, c, d, e, f = self._values
        return (a * x + c * y + e, b * x + d * y + f)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash(self._values)

    def __reduce__(self):
        return (Matrix, self._values)

    def __repr__(self):
        return 'canvasmock.Matrix({}, {}, {}, {}, {}, {})'.format(
            *(_format(v) for v in self._values)
        )


def _format(value: float):
    return int(value) if value.is_integer() else value
