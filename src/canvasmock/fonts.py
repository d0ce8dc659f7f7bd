# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Validation and normalization of CSS ``font`` shorthand strings.

Only the syntax is checked; no font is loaded and nothing is measured.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

FONT_STYLES = frozenset({'italic', 'oblique'})
FONT_VARIANTS = frozenset({'small-caps'})
FONT_WEIGHTS = frozenset({'bold', 'bolder', 'lighter'})
FONT_STRETCHES = frozenset(
    {
        'ultra-condensed',
        'extra-condensed',
        'condensed',
        'semi-condensed',
        'semi-expanded',
        'expanded',
        'extra-expanded',
        'ultra-expanded',
    }
)
SIZE_KEYWORDS = frozenset(
    {
        'xx-small',
        'x-small',
        'small',
        'medium',
        'large',
        'x-large',
        'xx-large',
        'xxx-large',
        'larger',
        'smaller',
    }
)
SYSTEM_FONTS = frozenset(
    {'caption', 'icon', 'menu', 'message-box', 'small-caption', 'status-bar'}
)

_LENGTH = re.compile(
    r'^(?:\d+\.?\d*|\.\d+)(?:px|pt|pc|em|rem|ex|ch|cm|mm|in|q|vw|vh|vmin|vmax|%)$'
)
_LINE_HEIGHT = re.compile(
    r'^(?:normal|(?:\d+\.?\d*|\.\d+)'
    r'(?:px|pt|pc|em|rem|ex|ch|cm|mm|in|q|vw|vh|vmin|vmax|%)?)$'
)
_NUMERIC_WEIGHT = re.compile(r'^\d+$')
_IDENT = re.compile(r'^-?[a-z_][a-z0-9_-]*$', re.IGNORECASE)


@dataclass(frozen=True)
class Font:
    """A parsed CSS font shorthand."""

    size: str
    family: tuple[str, ...]
    style: str = 'normal'
    variant: str = 'normal'
    weight: str = 'normal'
    stretch: str = 'normal'
    line_height: str | None = None

    def __str__(self) -> str:
        parts = [
            value
            for value in (self.style, self.variant, self.weight, self.stretch)
            if value != 'normal'
        ]
        size = self.size
        if self.line_height is not None:
            size += '/' + self.line_height
        parts.append(size)
        parts.append(', '.join(self.family))
        return ' '.join(parts)


def _is_size(token: str) -> bool:
    size = token.split('/', 1)[0].lower()
    return size in SIZE_KEYWORDS or bool(_LENGTH.match(size))


def _split_families(text: str) -> list[str]:
    """Split a family list on commas that are not inside quotes."""
    parts, current, quote = [], [], None
    for char in text:
        if quote:
            if char == quote:
                quote = None
        elif char in '"\'':
            quote = char
        elif char == ',':
            parts.append(''.join(current))
            current = []
            continue
        current.append(char)
    parts.append(''.join(current))
    return parts


def _parse_family(text: str) -> tuple[str, ...]:
    families = []
    for name in _split_families(text):
        name = name.strip()
        if not name:
            raise ValueError('empty font family')
        if name[0] in '"\'':
            if len(name) < 2 or name[-1] != name[0]:
                raise ValueError(f'unterminated font family: {name}')
        elif not all(_IDENT.match(word) for word in name.split()):
            raise ValueError(f'invalid font family: {name}')
        families.append(name)
    return tuple(families)


def parse_font(value: str) -> Font:
    """Parse a CSS font shorthand.

    Raises:
        ValueError: if the string is not a valid font shorthand.
    """
    if not isinstance(value, str):
        raise ValueError(f'not a font string: {value!r}')
    text = re.sub(r'\s*/\s*', '/', value.strip())
    if text.lower() in SYSTEM_FONTS:
        raise ValueError('system fonts are not supported')

    tokens = text.split()
    modifiers: dict[str, str] = {}
    for index, token in enumerate(tokens):
        if _is_size(token):
            break
        lowered = token.lower()
        if lowered == 'normal':
            continue
        if lowered in FONT_STYLES:
            slot = 'style'
        elif lowered in FONT_VARIANTS:
            slot = 'variant'
        elif lowered in FONT_WEIGHTS:
            slot = 'weight'
        elif _NUMERIC_WEIGHT.match(lowered) and 1 <= int(lowered) <= 1000:
            slot = 'weight'
        elif lowered in FONT_STRETCHES:
            slot = 'stretch'
        else:
            raise ValueError(f'unexpected token in font: {token}')
        if slot in modifiers:
            raise ValueError(f'duplicate font {slot}: {token}')
        modifiers[slot] = lowered
    else:
        raise ValueError('font size is missing')

    size, _, line_height = tokens[index].partition('/')
    if line_height and not _LINE_HEIGHT.match(line_height.lower()):
        raise ValueError(f'invalid line height: {line_height}')
    family = _parse_family(' '.join(tokens[index + 1 :]))
    return Font(
        size=size.lower(),
        family=family,
        line_height=line_height.lower() or None,
        **modifiers,
    )


def normalize_font(value: str) -> str | None:
    """Return the canonical form of a CSS font, or None if it does not parse."""
    try:
        return str(parse_font(value))
    except ValueError:
        return None


__all__ = ['Font', 'normalize_font', 'parse_font']
