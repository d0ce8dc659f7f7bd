# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: CC0-1.0

from __future__ import annotations

from math import pi
from types import SimpleNamespace

import pytest
from conftest import allclose, event_types
from hypothesis import given
from hypothesis import strategies as st

from canvasmock import (
    ArityError,
    CanvasRenderingContext2D,
    Matrix,
    TypeMismatchError,
)


def test_scale(ctx):
    ctx.scale(2, 3)
    assert ctx.get_transform() == Matrix(2, 0, 0, 3, 0, 0)
    event = ctx.events()[0]
    assert event.type == 'scale'
    assert dict(event.props) == {'x': 2, 'y': 3}
    assert event.transform == Matrix(2, 0, 0, 3, 0, 0)


def test_translate_then_zero_rotation(ctx):
    ctx.translate(10, 20)
    ctx.rotate(0)
    assert ctx.get_transform() == Matrix(1, 0, 0, 1, 10, 20)
    assert event_types(ctx.events()) == ['translate', 'rotate']


def test_operations_act_in_local_space(ctx):
    ctx.scale(2, 2)
    ctx.translate(5, 5)
    assert ctx.get_transform() == Matrix(2, 0, 0, 2, 10, 10)


def test_order_matters(ctx):
    ctx.translate(10, 0)
    ctx.rotate(pi / 2)
    first = ctx.get_transform()
    ctx.reset_transform()
    ctx.rotate(pi / 2)
    ctx.translate(10, 0)
    assert not allclose(first, ctx.get_transform())
    assert allclose(first, Matrix(0, 1, -1, 0, 10, 0))
    assert allclose(ctx.get_transform(), Matrix(0, 1, -1, 0, 0, 10))


def test_rotate_is_clockwise(ctx):
    ctx.rotate(pi / 2)
    x, y = ctx.get_transform().transform_point(1, 0)
    assert abs(x) < 1e-9 and abs(y - 1) < 1e-9


def test_transform_multiplies_on_the_right(ctx):
    ctx.translate(10, 10)
    ctx.transform(2, 0, 0, 2, 1, 1)
    assert ctx.get_transform() == Matrix(2, 0, 0, 2, 11, 11)
    assert dict(ctx.events()[-1].props) == {
        'a': 2,
        'b': 0,
        'c': 0,
        'd': 2,
        'e': 1,
        'f': 1,
    }


def test_numeric_strings_are_coerced(ctx):
    ctx.translate('3', ' 4 ')
    assert ctx.get_transform() == Matrix(1, 0, 0, 1, 3, 4)


@pytest.mark.parametrize(
    'call,args',
    [
        ('translate', (float('nan'), 1)),
        ('scale', (1, float('inf'))),
        ('rotate', (float('-inf'),)),
        ('transform', (1, 0, 0, 1, float('nan'), 0)),
        ('set_transform', (1, 0, 0, 1, 0, float('inf'))),
        ('translate', ('abc', 1)),
    ],
)
def test_non_finite_is_ignored(ctx, call, args):
    ctx.translate(1, 1)
    getattr(ctx, call)(*args)
    assert ctx.get_transform() == Matrix(1, 0, 0, 1, 1, 1)
    assert len(ctx.events()) == 1


def test_overflowing_result_is_ignored(ctx):
    ctx.scale(1e308, 1e308)
    ctx.scale(1e308, 1e308)
    assert ctx.get_transform() == Matrix(1e308, 0, 0, 1e308, 0, 0)
    assert event_types(ctx.events()) == ['scale']


@pytest.mark.parametrize(
    'call,args,required',
    [
        ('translate', (1,), 2),
        ('scale', (1,), 2),
        ('rotate', (), 1),
        ('transform', (1, 2, 3, 4, 5), 6),
    ],
)
def test_too_few_arguments(ctx, call, args, required):
    with pytest.raises(ArityError, match=f'{required} arguments? required'):
        getattr(ctx, call)(*args)
    assert ctx.events() == []


class TestSetTransform:
    def test_six_numbers(self, ctx):
        ctx.scale(5, 5)
        ctx.set_transform(1, 2, 3, 4, 5, 6)
        assert ctx.get_transform() == Matrix(1, 2, 3, 4, 5, 6)
        assert ctx.events()[-1].type == 'set_transform'

    def test_no_arguments_resets(self, ctx):
        ctx.scale(5, 5)
        ctx.set_transform()
        assert ctx.get_transform() == Matrix()

    def test_matrix_like(self, ctx):
        ctx.set_transform(SimpleNamespace(a=2, b=0, c=0, d=2, e=7, f=8))
        assert ctx.get_transform() == Matrix(2, 0, 0, 2, 7, 8)
        ctx.set_transform(Matrix(1, 0, 0, 1, 3, 3))
        assert ctx.get_transform() == Matrix(1, 0, 0, 1, 3, 3)

    @pytest.mark.parametrize('value', [42, 'matrix', None, SimpleNamespace(a=1)])
    def test_single_non_matrix(self, ctx, value):
        with pytest.raises(TypeMismatchError, match='is not an object'):
            ctx.set_transform(value)

    @pytest.mark.parametrize('count', [2, 3, 4, 5, 7])
    def test_wrong_arity(self, ctx, count):
        with pytest.raises(ArityError, match=r'Valid arities are: \[0, 1, 6\]'):
            ctx.set_transform(*range(count))
        assert ctx.events() == []

    def test_does_not_multiply(self, ctx):
        ctx.translate(100, 100)
        ctx.set_transform(2, 0, 0, 2, 0, 0)
        assert ctx.get_transform() == Matrix(2, 0, 0, 2, 0, 0)


def test_reset_transform(ctx):
    ctx.rotate(1)
    ctx.reset_transform()
    assert ctx.get_transform().is_identity
    assert ctx.events()[-1].type == 'reset_transform'


def test_current_transform_property(ctx):
    ctx.current_transform = Matrix(3, 0, 0, 3, 1, 2)
    assert ctx.current_transform == Matrix(3, 0, 0, 3, 1, 2)
    ctx.current_transform = 'nonsense'
    ctx.current_transform = Matrix(1, 0, 0, 1, float('nan'), 0)
    assert ctx.current_transform == Matrix(3, 0, 0, 3, 1, 2)
    assert event_types(ctx.events()) == ['current_transform']


def test_event_transform_is_a_snapshot(ctx):
    ctx.fill_rect(0, 0, 1, 1)
    ctx.translate(5, 5)
    ctx.fill_rect(0, 0, 1, 1)
    first, second = ctx.draw_calls()
    assert first.transform == Matrix()
    assert second.transform == Matrix(1, 0, 0, 1, 5, 5)


def test_get_transform_is_a_value(ctx):
    ctx.translate(1, 2)
    m = ctx.get_transform()
    ctx.translate(1, 2)
    assert m == Matrix(1, 0, 0, 1, 1, 2)


def test_saved_state_with_transform(ctx):
    with ctx.saved_state(transform=Matrix().translated(4, 4)):
        ctx.fill_rect(0, 0, 1, 1)
    assert event_types(ctx.events()) == ['save', 'transform', 'fill_rect', 'restore']
    assert ctx.draw_calls()[0].transform == Matrix(1, 0, 0, 1, 4, 4)
    assert ctx.get_transform() == Matrix()


@given(
    st.lists(
        st.tuples(
            st.floats(-100, 100, allow_nan=False),
            st.floats(-100, 100, allow_nan=False),
        ),
        max_size=8,
    )
)
def test_translations_compose(offsets):
    ctx = CanvasRenderingContext2D()
    for x, y in offsets:
        ctx.translate(x, y)
    e, f = ctx.get_transform().shorthand[4:]
    assert abs(e - sum(x for x, _ in offsets)) < 1e-6
    assert abs(f - sum(y for _, y in offsets)) < 1e-6
