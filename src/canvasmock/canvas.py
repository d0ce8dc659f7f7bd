# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""A recording stand-in for a 2D canvas rendering context.

:class:`CanvasRenderingContext2D` accepts the same operations as a browser's
2D context, applies the same argument coercion and validation, and tracks the
same drawing state. Nothing is rasterized. Instead every state change is
appended to an event log, and every operation that would paint pixels is
also appended to a draw call log, so tests can assert on what would have been
drawn::

    canvas = Canvas(width=100, height=100)
    ctx = canvas.get_context('2d')
    ctx.begin_path()
    ctx.rect(0, 0, 10, 10)
    ctx.stroke()
    assert [e.type for e in ctx.draw_calls()] == ['stroke']

Invalid input is handled two ways, as in the host API. Malformed calls (too
few arguments, a negative radius, an unknown enum string, a detached image)
raise a :class:`~canvasmock.exceptions.CanvasError`. Non-finite coordinates
and invalid property assignments are silently ignored: nothing changes and
nothing is recorded.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager

from PIL import Image

from canvasmock import settings
from canvasmock._validation import (
    check_arities,
    enum_or_none,
    enum_value,
    interface_of,
    is_finite,
    is_sequence,
    numbers,
    requires,
    to_number,
)
from canvasmock.colors import normalize_color
from canvasmock.enums import (
    CompositeOperation,
    Direction,
    FillRule,
    ImageSmoothingQuality,
    LineCap,
    LineJoin,
    Repetition,
    TextAlign,
    TextBaseline,
)
from canvasmock.exceptions import (
    InvalidStateError,
    RangeViolationError,
    TypeMismatchError,
)
from canvasmock.fonts import normalize_font
from canvasmock.models.image import MAX_PIXELS, ImageData, ImageSource, SourceKind
from canvasmock.models.matrix import Matrix, is_matrix_like
from canvasmock.models.resources import CanvasGradient, CanvasPattern, TextMetrics
from canvasmock.path import Path2D, PathMethods
from canvasmock.recorder import CanvasEvent, EventRecorder
from canvasmock.state import GraphicsState, StateStack

log = logging.getLogger(__name__)

_IGNORE = object()

_IMAGE_SOURCE_TYPES = (
    "'(CSSImageValue or HTMLImageElement or SVGImageElement or HTMLVideoElement "
    "or HTMLCanvasElement or ImageBitmap or OffscreenCanvas)'"
)


def _alpha(value):
    result = to_number(value)
    if is_finite(result) and 0 <= result <= 1:
        return result
    return _IGNORE


def _positive(value):
    result = to_number(value)
    if is_finite(result) and result > 0:
        return result
    return _IGNORE


def _non_negative(value):
    result = to_number(value)
    if is_finite(result) and result >= 0:
        return result
    return _IGNORE


def _finite(value):
    result = to_number(value)
    return result if is_finite(result) else _IGNORE


def _one_of(enum):
    def coerce(value):
        result = enum_or_none(enum, value)
        return _IGNORE if result is None else result

    return coerce


def _style(value):
    if isinstance(value, (CanvasGradient, CanvasPattern)):
        return value
    return _color(value)


def _color(value):
    if not isinstance(value, str):
        return _IGNORE
    result = normalize_color(value)
    return _IGNORE if result is None else result


def _font(value):
    result = normalize_font(value)
    return _IGNORE if result is None else result


def _filter(value):
    if not isinstance(value, str) or value == '':
        return 'none'
    return value


class _StateProperty:
    """A context property stored in the current :class:`GraphicsState`.

    Assignments are coerced; a value the coercion rejects is ignored without
    raising. Accepted values replace the field in the current frame and are
    recorded as an event named after the property.
    """

    def __init__(self, coerce, doc: str | None = None):
        self._coerce = coerce
        self.__doc__ = doc

    def __set_name__(self, owner, name):
        self.name = name

    def slot(self) -> str:
        return self.name

    def __get__(self, ctx, owner=None):
        if ctx is None:
            return self
        return getattr(ctx._state.current, self.slot())

    def __set__(self, ctx, value):
        result = self._coerce(value)
        if result is _IGNORE:
            log.debug("Ignored invalid assignment %s = %r", self.name, value)
            return
        ctx._state.update(**{self.slot(): result})
        ctx._record(self.name, value=result)


class _ShadowOffsetYProperty(_StateProperty):
    def slot(self) -> str:
        if settings.get_legacy_shadow_offset_y():
            return 'shadow_offset_x'
        return 'shadow_offset_y'


class CanvasRenderingContext2D(PathMethods):
    """Records-and-validates stand-in for a browser's 2D rendering context.

    Args:
        canvas: The :class:`Canvas` that owns this context, if any.
    """

    direction = _StateProperty(_one_of(Direction), "Text direction.")
    fill_style = _StateProperty(
        _style, "Fill color (normalized CSS string), gradient or pattern."
    )
    filter = _StateProperty(_filter, "CSS filter string; ``'none'`` by default.")
    font = _StateProperty(_font, "CSS font shorthand.")
    global_alpha = _StateProperty(_alpha, "Opacity between 0 and 1.")
    global_composite_operation = _StateProperty(_one_of(CompositeOperation))
    image_smoothing_enabled = _StateProperty(bool)
    image_smoothing_quality = _StateProperty(_one_of(ImageSmoothingQuality))
    line_cap = _StateProperty(_one_of(LineCap))
    line_dash_offset = _StateProperty(_finite)
    line_join = _StateProperty(_one_of(LineJoin))
    line_width = _StateProperty(_positive, "Stroke width; must be positive.")
    miter_limit = _StateProperty(_positive)
    shadow_blur = _StateProperty(_non_negative)
    shadow_color = _StateProperty(_color)
    shadow_offset_x = _StateProperty(_finite)
    shadow_offset_y = _ShadowOffsetYProperty(_finite)
    stroke_style = _StateProperty(
        _style, "Stroke color (normalized CSS string), gradient or pattern."
    )
    text_align = _StateProperty(_one_of(TextAlign))
    text_baseline = _StateProperty(_one_of(TextBaseline))

    def __init__(self, canvas: Canvas | None = None):
        self._canvas = canvas
        self._state = StateStack()
        self._recorder = EventRecorder()
        self._path: list[CanvasEvent] = [CanvasEvent('begin_path', Matrix())]

    @property
    def canvas(self) -> Canvas | None:
        """The canvas element this context draws on."""
        return self._canvas

    # Observability

    def events(self) -> list[CanvasEvent]:
        """Every state-affecting call since construction, oldest first."""
        return self._recorder.events

    def draw_calls(self) -> list[CanvasEvent]:
        """Every call that would have painted pixels, oldest first."""
        return self._recorder.draw_calls

    def path(self) -> list[CanvasEvent]:
        """The segments of the current path, starting with ``begin_path``."""
        return list(self._path)

    @property
    def state(self) -> GraphicsState:
        """The current drawing state, as an immutable snapshot."""
        return self._state.current

    @property
    def stack_depth(self) -> int:
        """Number of ``save()`` calls not yet matched by ``restore()``."""
        return self._state.depth

    def _record(self, type_: str, **props) -> CanvasEvent:
        return self._recorder.record(CanvasEvent(type_, self._transform, props))

    def _ignored(self, operation: str, values) -> None:
        log.debug("%s%r ignored: non-finite argument", operation, tuple(values))

    # State stack

    def save(self) -> None:
        """Push a copy of the current drawing state."""
        self._state.push()
        self._record('save')

    def restore(self) -> None:
        """Pop the drawing state. Does nothing if nothing was saved."""
        if self._state.pop():
            self._record('restore')

    @contextmanager
    def saved_state(self, *, transform=None):
        """Save the drawing state and restore it on exit.

        Optionally, concatenate a transformation matrix. Implements the
        commonly used pattern of::

            ctx.save()
            ctx.transform(...)
            ...
            ctx.restore()
        """
        self.save()
        try:
            if transform is not None:
                self.transform(*Matrix(transform).shorthand)
            yield self
        finally:
            self.restore()

    def get_line_dash(self) -> list[float]:
        """Return a copy of the current dash pattern."""
        return list(self._state.current.line_dash)

    @requires(1)
    def set_line_dash(self, segments) -> None:
        """Set the dash pattern; an odd-length pattern is repeated once.

        A pattern containing a negative or non-finite value is ignored.
        """
        if not is_sequence(segments):
            raise TypeMismatchError(
                'set_line_dash',
                'The provided value cannot be converted to a sequence.',
                interface=interface_of(self),
            )
        values = tuple(to_number(v) for v in segments)
        if not all(is_finite(v) and v >= 0 for v in values):
            log.debug("set_line_dash(%r) ignored: invalid segment", segments)
            return
        if len(values) % 2 == 1:
            values = values + values
        self._state.update(line_dash=values)
        self._record('set_line_dash', value=values)

    # Transform

    @property
    def _transform(self) -> Matrix:
        return self._state.current.transform

    def _apply_transform(self, operation: str, matrix: Matrix, **props) -> None:
        if not matrix.is_finite:
            log.debug("%s ignored: resulting matrix is not finite", operation)
            return
        self._state.update(transform=matrix)
        self._record(operation, **props)

    @requires(2)
    def translate(self, x, y) -> None:
        """Move the origin by (x, y) in the current coordinate space."""
        x, y = numbers(x, y)
        if not is_finite(x, y):
            return self._ignored('translate', (x, y))
        self._apply_transform('translate', self._transform.translated(x, y), x=x, y=y)

    @requires(2)
    def scale(self, x, y) -> None:
        """Scale the current coordinate space."""
        x, y = numbers(x, y)
        if not is_finite(x, y):
            return self._ignored('scale', (x, y))
        self._apply_transform('scale', self._transform.scaled(x, y), x=x, y=y)

    @requires(1)
    def rotate(self, angle) -> None:
        """Rotate the current coordinate space by *angle* radians, clockwise."""
        angle = to_number(angle)
        if not is_finite(angle):
            return self._ignored('rotate', (angle,))
        self._apply_transform('rotate', self._transform.rotated(angle), angle=angle)

    @requires(6)
    def transform(self, a, b, c, d, e, f) -> None:
        """Multiply the current matrix by the given one, on the right."""
        values = numbers(a, b, c, d, e, f)
        if not is_finite(*values):
            return self._ignored('transform', values)
        self._apply_transform(
            'transform',
            self._transform @ Matrix(*values),
            **dict(zip('abcdef', values)),
        )

    def set_transform(self, *args) -> None:
        """Replace the current matrix.

        Accepts no arguments (identity), one matrix-like object exposing
        ``a`` to ``f``, or six numbers.
        """
        check_arities(self, 'set_transform', len(args), (0, 1, 6))
        if not args:
            values = Matrix().shorthand
        elif len(args) == 1:
            if not is_matrix_like(args[0]):
                raise TypeMismatchError(
                    'set_transform',
                    f"parameter 1 ('{args[0]}') is not an object.",
                    interface=interface_of(self),
                )
            values = Matrix(args[0]).shorthand
        else:
            values = numbers(*args)
        if not is_finite(*values):
            return self._ignored('set_transform', values)
        self._apply_transform(
            'set_transform', Matrix(*values), **dict(zip('abcdef', values))
        )

    def reset_transform(self) -> None:
        """Set the current matrix to the identity."""
        identity = Matrix()
        self._apply_transform(
            'reset_transform', identity, **dict(zip('abcdef', identity))
        )

    def get_transform(self) -> Matrix:
        """Return the current transformation matrix."""
        return Matrix(self._transform)

    @property
    def current_transform(self) -> Matrix:
        return Matrix(self._transform)

    @current_transform.setter
    def current_transform(self, value) -> None:
        if not is_matrix_like(value):
            log.debug("Ignored invalid assignment current_transform = %r", value)
            return
        matrix = Matrix(value)
        if not matrix.is_finite:
            log.debug("Ignored non-finite current_transform %r", matrix)
            return
        self._apply_transform(
            'current_transform', matrix, **dict(zip('abcdef', matrix))
        )

    # Path

    def _path_transform(self) -> Matrix:
        return self._transform

    def _add_segment(self, event: CanvasEvent) -> None:
        self._path.append(event)
        self._recorder.record(event)

    def begin_path(self) -> None:
        """Discard the current path and start a new one."""
        event = self._record('begin_path')
        self._path = [event]

    def _path_and_rule(self, operation: str, args) -> tuple[tuple, str]:
        """Resolve the ``([path], [fill_rule])`` overload of fill and clip."""
        check_arities(self, operation, len(args), (0, 1, 2))
        if not args:
            return tuple(self._path), FillRule.NONZERO.value
        target, *rest = args
        if isinstance(target, Path2D):
            rule = rest[0] if rest else FillRule.NONZERO
            return target.segments, enum_value(
                FillRule, rule, operation, interface_of(self)
            )
        if rest:
            raise TypeMismatchError(
                operation,
                "parameter 1 is not of type 'Path2D'.",
                interface=interface_of(self),
            )
        return tuple(self._path), enum_value(
            FillRule, target, operation, interface_of(self)
        )

    def _path_argument(self, operation: str, path) -> tuple:
        if path is None:
            return tuple(self._path)
        if not isinstance(path, Path2D):
            raise TypeMismatchError(
                operation,
                "parameter 1 is not of type 'Path2D'.",
                interface=interface_of(self),
            )
        return path.segments

    def fill(self, *args) -> None:
        """Fill the current path, or a :class:`Path2D`.

        Call as ``fill()``, ``fill(fill_rule)``, ``fill(path)`` or
        ``fill(path, fill_rule)``. The fill rule is ``'nonzero'`` or
        ``'evenodd'``.
        """
        path, fill_rule = self._path_and_rule('fill', args)
        self._record('fill', path=path, fill_rule=fill_rule)

    def stroke(self, path: Path2D | None = None) -> None:
        """Stroke the current path, or a :class:`Path2D`."""
        self._record('stroke', path=self._path_argument('stroke', path))

    def clip(self, *args) -> None:
        """Clip to the current path, or a :class:`Path2D`.

        Takes the same arguments as :meth:`fill`. The clip is also appended to
        the current path.
        """
        path, fill_rule = self._path_and_rule('clip', args)
        event = self._record('clip', path=path, fill_rule=fill_rule)
        self._path.append(event)

    @requires(2)
    def is_point_in_path(self, *args) -> bool:
        """Record a hit test. Always returns False; there is no geometry."""
        path = None
        if isinstance(args[0], Path2D):
            check_arities(self, 'is_point_in_path', len(args), (3, 4))
            path, *args = args
        else:
            check_arities(self, 'is_point_in_path', len(args), (2, 3))
        x, y = numbers(*args[:2])
        rule = args[2] if len(args) > 2 else FillRule.NONZERO
        fill_rule = enum_value(FillRule, rule, 'is_point_in_path', interface_of(self))
        self._record(
            'is_point_in_path',
            x=x,
            y=y,
            fill_rule=fill_rule,
            path=self._path_argument('is_point_in_path', path),
        )
        return False

    @requires(2)
    def is_point_in_stroke(self, *args) -> bool:
        """Record a stroke hit test. Always returns False."""
        path = None
        if isinstance(args[0], Path2D):
            check_arities(self, 'is_point_in_stroke', len(args), (3,))
            path, *args = args
        else:
            check_arities(self, 'is_point_in_stroke', len(args), (2,))
        x, y = numbers(*args)
        self._record(
            'is_point_in_stroke',
            x=x,
            y=y,
            path=self._path_argument('is_point_in_stroke', path),
        )
        return False

    def scroll_path_into_view(self, path: Path2D | None = None) -> None:
        if not isinstance(path, Path2D):
            path = None
        self._record(
            'scroll_path_into_view',
            path=self._path_argument('scroll_path_into_view', path),
        )

    # Rectangles and text

    def _rect_call(self, operation: str, x, y, width, height) -> None:
        values = numbers(x, y, width, height)
        if not is_finite(*values):
            return self._ignored(operation, values)
        x, y, width, height = values
        self._record(operation, x=x, y=y, width=width, height=height)

    @requires(4)
    def fill_rect(self, x, y, width, height) -> None:
        self._rect_call('fill_rect', x, y, width, height)

    @requires(4)
    def stroke_rect(self, x, y, width, height) -> None:
        self._rect_call('stroke_rect', x, y, width, height)

    @requires(4)
    def clear_rect(self, x, y, width, height) -> None:
        """Erase a rectangle to transparent black."""
        self._rect_call('clear_rect', x, y, width, height)

    def _text_call(self, operation: str, text, x, y, max_width) -> None:
        values = numbers(x, y) if max_width is None else numbers(x, y, max_width)
        if not is_finite(*values):
            return self._ignored(operation, values)
        self._record(
            operation,
            text=str(text),
            x=values[0],
            y=values[1],
            max_width=values[2] if max_width is not None else None,
        )

    @requires(3)
    def fill_text(self, text, x, y, max_width=None) -> None:
        self._text_call('fill_text', text, x, y, max_width)

    @requires(3)
    def stroke_text(self, text, x, y, max_width=None) -> None:
        self._text_call('stroke_text', text, x, y, max_width)

    @requires(1)
    def measure_text(self, text) -> TextMetrics:
        """Record a text measurement and return placeholder metrics."""
        text = '' if text is None else str(text)
        self._record('measure_text', text=text)
        return TextMetrics.for_text(text)

    # Images

    def _image_source(self, operation: str, image) -> ImageSource:
        if isinstance(image, ImageSource):
            if image.closed:
                raise InvalidStateError(
                    operation,
                    'The image source is detached.',
                    interface=interface_of(self),
                )
            return image
        if isinstance(image, Canvas):
            return ImageSource(SourceKind.CANVAS, image.width, image.height)
        if isinstance(image, Image.Image):
            return ImageSource.from_pil(image)
        raise TypeMismatchError(
            operation,
            f'The provided value is not of type {_IMAGE_SOURCE_TYPES}',
            interface=interface_of(self),
        )

    def draw_image(self, *args) -> None:
        """Draw an image.

        Call as ``draw_image(image, dx, dy)``,
        ``draw_image(image, dx, dy, dw, dh)`` or
        ``draw_image(image, sx, sy, sw, sh, dx, dy, dw, dh)``. The recorded
        event always carries the full source and destination rectangles.

        *image* may be an :class:`~canvasmock.models.ImageSource`, a
        :class:`Canvas` or a Pillow image.
        """
        check_arities(self, 'draw_image', len(args), (3, 5, 9))
        image, *coords = args
        source = self._image_source('draw_image', image)
        values = numbers(*coords)
        if not is_finite(*values):
            return self._ignored('draw_image', values)
        width, height = float(source.width), float(source.height)
        if len(values) == 2:
            dx, dy = values
            sx, sy, sw, sh = 0.0, 0.0, width, height
            dw, dh = width, height
        elif len(values) == 4:
            dx, dy, dw, dh = values
            sx, sy, sw, sh = 0.0, 0.0, width, height
        else:
            sx, sy, sw, sh, dx, dy, dw, dh = values
        self._record(
            'draw_image',
            image=image,
            sx=sx,
            sy=sy,
            s_width=sw,
            s_height=sh,
            dx=dx,
            dy=dy,
            d_width=dw,
            d_height=dh,
        )

    def _image_size(self, operation: str, width, height) -> tuple[int, int]:
        width, height = numbers(width, height)
        if not is_finite(width, height):
            raise TypeMismatchError(
                operation,
                'The provided double value is non-finite.',
                interface=interface_of(self),
            )
        width, height = abs(int(width)), abs(int(height))
        if width == 0:
            raise RangeViolationError(
                operation, 'The source width is 0.', interface=interface_of(self)
            )
        if height == 0:
            raise RangeViolationError(
                operation, 'The source height is 0.', interface=interface_of(self)
            )
        if width * height > MAX_PIXELS:
            raise RangeViolationError(
                operation,
                'Out of memory at ImageData creation.',
                interface=interface_of(self),
            )
        return width, height

    def create_image_data(self, *args) -> ImageData:
        """Create image data from ``(width, height)`` or an existing ImageData."""
        check_arities(self, 'create_image_data', len(args), (1, 2))
        if len(args) == 1:
            if not isinstance(args[0], ImageData):
                raise TypeMismatchError(
                    'create_image_data',
                    "parameter 1 is not of type 'ImageData'.",
                    interface=interface_of(self),
                )
            result = args[0].copy()
        else:
            result = ImageData(*self._image_size('create_image_data', *args))
        self._record('create_image_data', width=result.width, height=result.height)
        return result

    @requires(4)
    def get_image_data(self, sx, sy, sw, sh) -> ImageData:
        """Return blank image data of the requested size; nothing is drawn."""
        if not is_finite(*numbers(sx, sy)):
            raise TypeMismatchError(
                'get_image_data',
                'The provided double value is non-finite.',
                interface=interface_of(self),
            )
        return ImageData(*self._image_size('get_image_data', sw, sh))

    def put_image_data(self, *args) -> None:
        """Record writing image data at ``(x, y)``, optionally a dirty rectangle."""
        check_arities(self, 'put_image_data', len(args), (3, 7))
        data, *coords = args
        if not isinstance(data, ImageData):
            raise TypeMismatchError(
                'put_image_data',
                "parameter 1 is not of type 'ImageData'.",
                interface=interface_of(self),
            )
        values = numbers(*coords)
        if not is_finite(*values):
            return self._ignored('put_image_data', values)
        if len(values) == 2:
            values = values + (0.0, 0.0, float(data.width), float(data.height))
        x, y, dirty_x, dirty_y, dirty_width, dirty_height = values
        self._record(
            'put_image_data',
            x=x,
            y=y,
            dirty_x=dirty_x,
            dirty_y=dirty_y,
            dirty_width=dirty_width,
            dirty_height=dirty_height,
        )

    # Gradients and patterns

    @requires(4)
    def create_linear_gradient(self, x0, y0, x1, y1) -> CanvasGradient:
        values = numbers(x0, y0, x1, y1)
        if not is_finite(*values):
            raise TypeMismatchError(
                'create_linear_gradient',
                'The provided double value is non-finite.',
                interface=interface_of(self),
            )
        geometry = dict(zip(('x0', 'y0', 'x1', 'y1'), values))
        self._record('create_linear_gradient', **geometry)
        return CanvasGradient('linear', **geometry)

    @requires(6)
    def create_radial_gradient(self, x0, y0, r0, x1, y1, r1) -> CanvasGradient:
        values = numbers(x0, y0, r0, x1, y1, r1)
        if not is_finite(*values):
            raise TypeMismatchError(
                'create_radial_gradient',
                'The provided double value is non-finite.',
                interface=interface_of(self),
            )
        geometry = dict(zip(('x0', 'y0', 'r0', 'x1', 'y1', 'r1'), values))
        for name in ('r0', 'r1'):
            if geometry[name] < 0:
                raise RangeViolationError(
                    'create_radial_gradient',
                    f'The {name} provided is less than 0.',
                    interface=interface_of(self),
                )
        self._record('create_radial_gradient', **geometry)
        return CanvasGradient('radial', **geometry)

    @requires(2)
    def create_pattern(self, image, repetition) -> CanvasPattern:
        """Create a pattern; ``None`` or ``''`` repetition means ``'repeat'``."""
        if repetition is None or repetition == '':
            repetition = Repetition.REPEAT
        repetition = enum_value(
            Repetition, repetition, 'create_pattern', interface_of(self)
        )
        self._image_source('create_pattern', image)
        self._record('create_pattern', image=image, repetition=repetition)
        return CanvasPattern(repetition)

    # Hit regions and focus

    def add_hit_region(
        self,
        *,
        path: Path2D | None = None,
        fill_rule=None,
        id=None,  # pylint: disable=redefined-builtin
        parent_id=None,
        cursor='inherit',
        control=None,
        label=None,
        role=None,
    ) -> None:
        if path is None and id is None:
            raise InvalidStateError(
                'add_hit_region',
                'Both id and control are null.',
                interface=interface_of(self),
            )
        if fill_rule is not None:
            fill_rule = enum_value(
                FillRule, fill_rule, 'add_hit_region', interface_of(self)
            )
        self._record(
            'add_hit_region',
            path=(
                self._path_argument('add_hit_region', path)
                if path is not None
                else None
            ),
            fill_rule=fill_rule,
            id=id,
            parent_id=parent_id,
            cursor=cursor,
            control=control,
            label=label,
            role=role,
        )

    @requires(1)
    def remove_hit_region(self, id) -> None:  # pylint: disable=redefined-builtin
        self._record('remove_hit_region', id=id)

    def clear_hit_regions(self) -> None:
        self._record('clear_hit_regions')

    def draw_focus_if_needed(self, *args) -> None:
        """Record a focus ring request: ``([path], element)``."""
        check_arities(self, 'draw_focus_if_needed', len(args), (1, 2))
        path = None
        if len(args) == 2:
            path = args[0]
            if not isinstance(path, Path2D):
                raise TypeMismatchError(
                    'draw_focus_if_needed',
                    "parameter 1 is not of type 'Path2D'.",
                    interface=interface_of(self),
                )
        element = args[-1]
        if element is None:
            raise TypeMismatchError(
                'draw_focus_if_needed',
                f"parameter {len(args)} is not of type 'Element'.",
                interface=interface_of(self),
            )
        self._record(
            'draw_focus_if_needed',
            path=path.segments if path is not None else None,
            element=element,
        )

    def __repr__(self):
        return (
            f'<CanvasRenderingContext2D depth={self.stack_depth} '
            f'events={len(self._recorder)}>'
        )


class Canvas:
    """Stand-in for a canvas element.

    A Canvas hands out a single :class:`CanvasRenderingContext2D` from
    :meth:`get_context` and can itself be drawn onto another context.
    """

    def __init__(self, *, width: int = 300, height: int = 150):
        """Initialize a canvas."""
        self.width = int(width)
        self.height = int(height)
        self._context: CanvasRenderingContext2D | None = None

    def get_context(self, kind: str = '2d') -> CanvasRenderingContext2D | None:
        """Return the 2D context; other context kinds are unavailable."""
        if kind != '2d':
            return None
        if self._context is None:
            self._context = CanvasRenderingContext2D(self)
        return self._context

    def __repr__(self):
        return f'<Canvas {self.width}x{self.height}>'
