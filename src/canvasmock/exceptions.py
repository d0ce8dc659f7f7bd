# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Exceptions raised by canvasmock.

Every failure a real 2D context would throw is raised as a subclass of
:class:`CanvasError` that also derives from the builtin exception a Python
caller would expect, so ``except TypeError`` and ``except CanvasError`` both
work.

Invalid property assignments and non-finite coordinates never raise; they
are silently ignored, as the host API does.
"""

from __future__ import annotations

CONTEXT_NAME = 'CanvasRenderingContext2D'


class CanvasError(Exception):
    """Base class for all errors raised by canvasmock."""

    #: Name of the equivalent host exception (``TypeError``, ``IndexSizeError``...)
    host_name = 'Error'

    def __init__(self, operation: str, detail: str, *, interface: str = CONTEXT_NAME):
        self.operation = operation
        self.detail = detail
        self.interface = interface
        super().__init__(
            f"Failed to execute '{operation}' on '{interface}': {detail}"
        )


class ArityError(CanvasError, TypeError):
    """Too few arguments, or an argument count no overload accepts."""

    host_name = 'TypeError'

    def __init__(
        self,
        operation: str,
        required: int | None = None,
        given: int = 0,
        *,
        valid: tuple[int, ...] | None = None,
        interface: str = CONTEXT_NAME,
    ):
        self.required = required
        self.given = given
        self.valid = valid
        if valid is not None:
            allowed = ', '.join(str(n) for n in valid)
            detail = (
                f"Valid arities are: [{allowed}], but {given} arguments provided."
            )
        else:
            noun = 'argument' if required == 1 else 'arguments'
            detail = f"{required} {noun} required, but only {given} present."
        super().__init__(operation, detail, interface=interface)


class TypeMismatchError(CanvasError, TypeError):
    """An argument is not of an acceptable type."""

    host_name = 'TypeError'


class RangeViolationError(CanvasError, ValueError):
    """A numeric argument is outside its permitted range."""

    host_name = 'IndexSizeError'


class InvalidEnumError(CanvasError, ValueError):
    """A string argument is not one of the permitted enum values."""

    host_name = 'TypeError'

    def __init__(
        self,
        operation: str,
        value,
        enum_name: str,
        allowed: tuple[str, ...],
        *,
        interface: str = CONTEXT_NAME,
    ):
        self.value = value
        self.allowed = allowed
        detail = (
            f"The provided value '{value}' is not a valid enum value of type "
            f"{enum_name}. Allowed values: {', '.join(allowed)}."
        )
        super().__init__(operation, detail, interface=interface)


class InvalidStateError(CanvasError, RuntimeError):
    """A resource handle is detached or otherwise unusable."""

    host_name = 'InvalidStateError'


__all__ = [
    'ArityError',
    'CanvasError',
    'InvalidEnumError',
    'InvalidStateError',
    'RangeViolationError',
    'TypeMismatchError',
]
