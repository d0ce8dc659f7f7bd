# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Append-only logs of everything a context was asked to do."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from canvasmock.models.matrix import Matrix

log = logging.getLogger(__name__)

#: Event types that would paint pixels on a real surface.
DRAW_CALL_TYPES = frozenset(
    {
        'clear_rect',
        'draw_image',
        'fill',
        'fill_rect',
        'fill_text',
        'stroke',
        'stroke_rect',
        'stroke_text',
    }
)


@dataclass(frozen=True)
class CanvasEvent:
    """One recorded call.

    ``transform`` is the current transformation matrix at the time of the call
    (after the call, for operations that change it). ``props`` holds the
    validated and coerced arguments and is read-only.
    """

    type: str
    transform: Matrix
    props: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.props, MappingProxyType):
            object.__setattr__(self, 'props', MappingProxyType(dict(self.props)))

    @property
    def is_draw_call(self) -> bool:
        return self.type in DRAW_CALL_TYPES

    def __repr__(self):
        args = ', '.join(f'{k}={v!r}' for k, v in self.props.items())
        return f'<CanvasEvent {self.type}({args}) {self.transform.shorthand}>'


class EventRecorder:
    """Records events, and separately the subset of them that are draw calls.

    A draw call is appended to both logs as the same object, so every entry of
    :attr:`draw_calls` also appears in :attr:`events` in the same relative
    order.
    """

    def __init__(self):
        self._events: list[CanvasEvent] = []
        self._draw_calls: list[CanvasEvent] = []

    def record(self, event: CanvasEvent) -> CanvasEvent:
        self._events.append(event)
        if event.is_draw_call:
            self._draw_calls.append(event)
        log.debug("%r", event)
        return event

    @property
    def events(self) -> list[CanvasEvent]:
        """A copy of every recorded event, oldest first."""
        return list(self._events)

    @property
    def draw_calls(self) -> list[CanvasEvent]:
        """A copy of every recorded draw call, oldest first."""
        return list(self._draw_calls)

    def __len__(self):
        return len(self._events)
