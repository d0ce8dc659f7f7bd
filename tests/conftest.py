# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: CC0-1.0

from __future__ import annotations

from math import isclose

import pytest
from PIL import Image

from canvasmock import Canvas, ImageSource, SourceKind, settings


@pytest.fixture
def canvas():
    return Canvas(width=200, height=100)


@pytest.fixture
def ctx(canvas):
    return canvas.get_context('2d')


@pytest.fixture
def image():
    return ImageSource(SourceKind.IMAGE, 40, 30)


@pytest.fixture
def pil_image():
    return Image.new('RGB', (20, 10), 'red')


@pytest.fixture
def legacy_shadow_offset_y():
    previous = settings.set_legacy_shadow_offset_y(True)
    yield
    settings.set_legacy_shadow_offset_y(previous)


def allclose(m1, m2, abs_tol=1e-9):
    return all(
        isclose(x, y, abs_tol=abs_tol) for x, y in zip(m1.shorthand, m2.shorthand)
    )


def event_types(events):
    return [event.type for event in events]
