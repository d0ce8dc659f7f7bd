# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: CC0-1.0

from __future__ import annotations

import math
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis.strategies import floats, integers

from canvasmock import ArityError, FillRule, InvalidEnumError, settings
from canvasmock._validation import (
    check_arities,
    enum_or_none,
    enum_value,
    is_sequence,
    to_number,
)


@pytest.mark.parametrize(
    'value,expected',
    [
        (True, 1.0),
        (False, 0.0),
        (3, 3.0),
        (Decimal('2.5'), 2.5),
        ('  4.5 ', 4.5),
        ('', 0.0),
        ('0x10', 16.0),
        ('1e3', 1000.0),
        ('-Infinity', -math.inf),
        (10**400, math.inf),
        (-(10**400), -math.inf),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize('value', [None, 'abc', '1_000', '0xzz', object(), [1]])
def test_to_number_nan(value):
    assert math.isnan(to_number(value))


@given(floats(allow_nan=False))
def test_to_number_preserves_floats(value):
    assert to_number(value) == value


@given(integers(-(2**53), 2**53))
def test_to_number_of_numeric_strings(value):
    assert to_number(str(value)) == value


def test_check_arities():
    check_arities(object(), 'draw_image', 5, (3, 5, 9))
    with pytest.raises(ArityError, match="on 'object': 3 arguments required"):
        check_arities(object(), 'draw_image', 1, (3, 5, 9))
    with pytest.raises(ArityError, match='but 6 arguments provided'):
        check_arities(object(), 'draw_image', 6, (3, 5, 9))


def test_enum_value():
    assert enum_value(FillRule, 'evenodd', 'fill', 'Path2D') == 'evenodd'
    assert enum_value(FillRule, FillRule.EVENODD, 'fill', 'Path2D') == 'evenodd'
    with pytest.raises(InvalidEnumError, match='Allowed values: nonzero, evenodd'):
        enum_value(FillRule, 'even', 'fill', 'Path2D')
    assert enum_or_none(FillRule, 'even') is None
    assert enum_or_none(FillRule, ['nonzero']) is None


@pytest.mark.parametrize(
    'value,expected',
    [([1], True), ((1,), True), (range(3), True), ('12', False), ({}, False)],
)
def test_is_sequence(value, expected):
    assert is_sequence(value) is expected


def test_legacy_shadow_setting_round_trip():
    assert settings.get_legacy_shadow_offset_y() is False
    previous = settings.set_legacy_shadow_offset_y(True)
    try:
        assert previous is False
        assert settings.get_legacy_shadow_offset_y() is True
    finally:
        settings.set_legacy_shadow_offset_y(previous)
