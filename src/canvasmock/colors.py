# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""CSS color parsing and normalization.

Color strings are parsed with Pillow's :mod:`PIL.ImageColor`, which understands
named colors, hex notation and the ``rgb()``/``hsl()`` functions. Pillow also
accepts ``hsv()``, which is not CSS, so it is rejected here. CSS allows a
fractional alpha channel (``rgba(255, 0, 0, 0.5)``), which Pillow does not, so
the alpha component is split off here before Pillow sees the rest.

Normalized output matches what a browser canvas reports back:

* ``#rrggbb`` for opaque colors, or ``#rgb`` when every channel is a doubled
  hex digit;
* ``rgba(r, g, b, a)`` when alpha is not 1.
"""

from __future__ import annotations

import re
from collections import namedtuple

from PIL import ImageColor

RGBA = namedtuple('RGBA', ['red', 'green', 'blue', 'alpha'])

TRANSPARENT = RGBA(0, 0, 0, 0.0)

_FUNCTIONAL = re.compile(r'^(rgb|hsl)a?\(([^()]*)\)$')
_ALPHA = re.compile(r'^([+-]?(?:\d+\.?\d*|\.\d+))(%?)$')
_NON_CSS_FUNCTIONS = ('hsv', 'hsb')


def _split_alpha(name: str, body: str) -> tuple[str, float]:
    parts = [part.strip() for part in body.split(',')]
    if len(parts) == 3:
        return f'{name}({", ".join(parts)})', 1.0
    if len(parts) != 4:
        raise ValueError(f'unknown color specifier: {name}({body})')
    m = _ALPHA.match(parts[3])
    if not m:
        raise ValueError(f'invalid alpha value: {parts[3]}')
    alpha = float(m.group(1))
    if m.group(2):
        alpha /= 100
    alpha = min(max(alpha, 0.0), 1.0)
    return f'{name}({", ".join(parts[:3])})', alpha


def parse_color(value: str) -> RGBA:
    """Parse a CSS color string.

    Raises:
        ValueError: if the string is not a color.
    """
    if not isinstance(value, str):
        raise ValueError(f'not a color string: {value!r}')
    text = value.strip().lower()
    if text == 'transparent':
        return TRANSPARENT
    if text.startswith(_NON_CSS_FUNCTIONS):
        raise ValueError(f'unknown color specifier: {value}')
    alpha = None
    m = _FUNCTIONAL.match(text)
    if m:
        text, alpha = _split_alpha(m.group(1), m.group(2))
    rgb = ImageColor.getrgb(text)
    if alpha is None:
        alpha = rgb[3] / 255 if len(rgb) == 4 else 1.0
    red, green, blue = (min(max(int(channel), 0), 255) for channel in rgb[:3])
    return RGBA(red, green, blue, alpha)


def _format_alpha(alpha: float) -> str:
    return f'{round(alpha, 6):g}'


def format_color(color: RGBA) -> str:
    """Serialize a parsed color in the canvas's canonical form."""
    if color.alpha != 1:
        return (
            f'rgba({color.red}, {color.green}, {color.blue}, '
            f'{_format_alpha(color.alpha)})'
        )
    hexed = f'{color.red:02x}{color.green:02x}{color.blue:02x}'
    if hexed[0] == hexed[1] and hexed[2] == hexed[3] and hexed[4] == hexed[5]:
        return '#' + hexed[0] + hexed[2] + hexed[4]
    return '#' + hexed


def normalize_color(value: str) -> str | None:
    """Return the canonical form of a CSS color, or None if it does not parse."""
    try:
        return format_color(parse_color(value))
    except ValueError:
        return None


__all__ = ['RGBA', 'format_color', 'normalize_color', 'parse_color']
