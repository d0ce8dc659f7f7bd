# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Argument coercion and validation shared by every canvas operation."""

from __future__ import annotations

import functools
import inspect
import math
from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from canvasmock.exceptions import ArityError, InvalidEnumError

E = TypeVar('E', bound=Enum)


def to_number(value) -> float:
    """Cast a value to a float the way the host's ``Number(value)`` does.

    Booleans become 0 or 1, strings are parsed after stripping whitespace
    (the empty string is 0) and anything that cannot be converted is NaN.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        return _parse_number(value)
    if value is None:
        return math.nan
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return math.nan


def _parse_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if '_' in text:
        return math.nan
    if text[:2].lower() in ('0x', '0o', '0b'):
        try:
            return float(int(text, 0))
        except ValueError:
            return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def is_finite(*values: float) -> bool:
    """Return True if every value is a finite float."""
    return all(math.isfinite(v) for v in values)


def numbers(*values) -> tuple[float, ...]:
    return tuple(to_number(v) for v in values)


def interface_of(obj) -> str:
    return type(obj).__name__


def requires(count: int, operation: str | None = None):
    """Decorate a method so fewer than *count* arguments raise ArityError.

    Only the first *count* parameters are counted, whether they are passed by
    position or by name; optional arguments never make up for a missing one.
    The check runs before the method body, so no state is touched when it
    fails.
    """

    def decorator(fn):
        name = operation or fn.__name__
        params = list(inspect.signature(fn).parameters.values())[1:]
        required = [
            p.name
            for p in params[:count]
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]

        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            given = len(args) + sum(
                1 for param in required[len(args) :] if param in kwargs
            )
            if given < count:
                raise ArityError(name, count, given, interface=interface_of(self))
            return fn(self, *args, **kwargs)

        return wrapper

    return decorator


def check_arities(obj, operation: str, given: int, valid: tuple[int, ...]) -> None:
    """Raise ArityError unless *given* is one of the *valid* overload sizes."""
    if given < valid[0]:
        raise ArityError(operation, valid[0], given, interface=interface_of(obj))
    if given not in valid:
        raise ArityError(
            operation, given=given, valid=valid, interface=interface_of(obj)
        )


def enum_value(enum: type[E], value, operation: str, interface: str) -> str:
    """Return the string value of *value* as a member of *enum*, or raise."""
    try:
        return enum(value).value
    except (ValueError, TypeError):
        allowed = tuple(member.value for member in enum)
        raise InvalidEnumError(
            operation, value, enum.__name__, allowed, interface=interface
        ) from None


def enum_or_none(enum: type[E], value) -> str | None:
    """Return the string value of *value* in *enum*, or None if it is not one."""
    try:
        return enum(value).value
    except (ValueError, TypeError):
        return None


def is_sequence(value) -> bool:
    """True for list-like inputs; strings and mappings are not sequences here."""
    if isinstance(value, (str, bytes, bytearray, dict)):
        return False
    return isinstance(value, Iterable)
