# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: CC0-1.0

from __future__ import annotations

import dataclasses

import pytest
from conftest import event_types
from hypothesis import given
from hypothesis.strategies import floats, lists, sampled_from, tuples

from canvasmock import (
    DRAW_CALL_TYPES,
    CanvasEvent,
    CanvasRenderingContext2D,
    ImageSource,
    Matrix,
    SourceKind,
)
from canvasmock.recorder import EventRecorder

IMAGE = ImageSource(SourceKind.IMAGE, 8, 8)

OPERATIONS = {
    'fill_rect': lambda ctx, x: ctx.fill_rect(x, x, 1, 1),
    'stroke_rect': lambda ctx, x: ctx.stroke_rect(x, x, 1, 1),
    'clear_rect': lambda ctx, x: ctx.clear_rect(x, x, 1, 1),
    'fill_text': lambda ctx, x: ctx.fill_text('t', x, x),
    'draw_image': lambda ctx, x: ctx.draw_image(IMAGE, x, x),
    'fill': lambda ctx, x: ctx.fill(),
    'stroke': lambda ctx, x: ctx.stroke(),
    'move_to': lambda ctx, x: ctx.move_to(x, x),
    'translate': lambda ctx, x: ctx.translate(x, 0),
    'save': lambda ctx, x: ctx.save(),
    'restore': lambda ctx, x: ctx.restore(),
    'line_width': lambda ctx, x: setattr(ctx, 'line_width', x),
    'measure_text': lambda ctx, x: ctx.measure_text('m'),
}


@given(
    lists(
        tuples(
            sampled_from(sorted(OPERATIONS)),
            floats(-1e6, 1e6) | sampled_from([float('nan'), float('inf')]),
        ),
        max_size=30,
    )
)
def test_draw_calls_are_a_subsequence_of_events(calls):
    ctx = CanvasRenderingContext2D()
    for name, value in calls:
        OPERATIONS[name](ctx, value)
    events = ctx.events()
    draw_calls = ctx.draw_calls()
    assert draw_calls == [e for e in events if e.type in DRAW_CALL_TYPES]
    positions = [next(i for i, e in enumerate(events) if e is d) for d in draw_calls]
    assert positions == sorted(positions)


def test_draw_call_is_same_object(ctx):
    ctx.fill_rect(0, 0, 1, 1)
    assert ctx.draw_calls()[0] is ctx.events()[0]


def test_accessors_return_copies(ctx):
    ctx.fill_rect(0, 0, 1, 1)
    ctx.events().clear()
    ctx.draw_calls().clear()
    assert len(ctx.events()) == 1
    assert len(ctx.draw_calls()) == 1


def test_event_is_frozen(ctx):
    ctx.translate(1, 2)
    event = ctx.events()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.type = 'scale'
    with pytest.raises(TypeError):
        event.props['x'] = 99


def test_props_are_copied_on_creation():
    props = {'x': 1}
    event = CanvasEvent('move_to', Matrix(), props)
    props['x'] = 2
    assert event.props['x'] == 1


def test_draw_call_types():
    assert DRAW_CALL_TYPES == {
        'clear_rect',
        'draw_image',
        'fill',
        'fill_rect',
        'fill_text',
        'stroke',
        'stroke_rect',
        'stroke_text',
    }
    assert CanvasEvent('stroke_text', Matrix()).is_draw_call
    assert not CanvasEvent('clip', Matrix()).is_draw_call


def test_recorder():
    recorder = EventRecorder()
    recorder.record(CanvasEvent('save', Matrix()))
    recorder.record(CanvasEvent('fill', Matrix(), {'fill_rule': 'nonzero'}))
    assert len(recorder) == 2
    assert event_types(recorder.events) == ['save', 'fill']
    assert event_types(recorder.draw_calls) == ['fill']


def test_event_repr(ctx):
    ctx.move_to(1, 2)
    assert repr(ctx.events()[0]) == (
        '<CanvasEvent move_to(x=1.0, y=2.0) (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)>'
    )


def test_context_repr(ctx):
    ctx.save()
    ctx.fill_rect(0, 0, 1, 1)
    assert repr(ctx) == '<CanvasRenderingContext2D depth=1 events=2>'
