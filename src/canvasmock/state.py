# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""The drawing state stack manipulated by ``save()`` and ``restore()``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from canvasmock.models.matrix import Matrix

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphicsState:
    """Every stacked attribute of a 2D context at one save depth.

    Frames are immutable; setters produce a new frame with one field
    replaced, so a saved frame can never be changed through the live one.
    """

    direction: str = 'inherit'
    fill_style: Any = '#000'
    filter: str = 'none'
    font: str = '10px sans-serif'
    global_alpha: float = 1.0
    global_composite_operation: str = 'source-over'
    image_smoothing_enabled: bool = True
    image_smoothing_quality: str = 'low'
    line_cap: str = 'butt'
    line_dash: tuple[float, ...] = ()
    line_dash_offset: float = 0.0
    line_join: str = 'miter'
    line_width: float = 1.0
    miter_limit: float = 10.0
    shadow_blur: float = 0.0
    shadow_color: str = 'rgba(0, 0, 0, 0)'
    shadow_offset_x: float = 0.0
    shadow_offset_y: float = 0.0
    stroke_style: Any = '#000'
    text_align: str = 'start'
    text_baseline: str = 'alphabetic'
    transform: Matrix = field(default_factory=Matrix)


class StateStack:
    """A stack of :class:`GraphicsState` frames; the last one is current."""

    def __init__(self, initial: GraphicsState | None = None):
        self._frames: list[GraphicsState] = [initial or GraphicsState()]

    @property
    def current(self) -> GraphicsState:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        """Number of saved frames below the current one."""
        return len(self._frames) - 1

    def push(self) -> None:
        self._frames.append(self._frames[-1])

    def pop(self) -> bool:
        """Discard the current frame. Returns False, doing nothing, at depth 0."""
        if len(self._frames) == 1:
            log.debug("restore() with an empty state stack ignored")
            return False
        self._frames.pop()
        return True

    def update(self, **changes) -> GraphicsState:
        """Replace attributes of the current frame."""
        self._frames[-1] = replace(self._frames[-1], **changes)
        return self._frames[-1]

    def __len__(self):
        return len(self._frames)
