# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Stand-ins for the image types a 2D context draws from and returns."""

from __future__ import annotations

from enum import Enum

from PIL import Image

#: Largest pixel count an ImageData may hold, the area limit browsers apply.
MAX_PIXELS = 16384 * 16384


class SourceKind(Enum):
    """The kinds of element a context accepts as an image source."""

    IMAGE = 'image'
    VIDEO = 'video'
    CANVAS = 'canvas'
    BITMAP = 'bitmap'


class ImageSource:
    """An image, video frame, canvas or bitmap that can be drawn.

    Only the dimensions are tracked. A :attr:`SourceKind.BITMAP` source can be
    closed, after which drawing it raises
    :class:`~canvasmock.exceptions.InvalidStateError`.

    Sources are opaque handles: two sources are equal only if they are the
    same object.
    """

    def __init__(self, kind: SourceKind, width: int, height: int):
        self.kind = SourceKind(kind)
        self.width = int(width)
        self.height = int(height)
        self.closed = False

    @classmethod
    def bitmap(cls, width: int, height: int) -> ImageSource:
        return cls(SourceKind.BITMAP, width, height)

    @classmethod
    def from_pil(cls, image: Image.Image) -> ImageSource:
        """Wrap a Pillow image as an image element of the same size."""
        return cls(SourceKind.IMAGE, image.width, image.height)

    def close(self) -> None:
        """Release a bitmap; only bitmaps can be closed."""
        if self.kind is not SourceKind.BITMAP:
            raise TypeError(f'{self.kind.value} sources cannot be closed')
        self.closed = True
        self.width = self.height = 0

    def __repr__(self):
        state = ' closed' if self.closed else ''
        return f'<ImageSource {self.kind.value} {self.width}x{self.height}{state}>'


class ImageData:
    """A block of RGBA pixels, as returned by ``create_image_data``.

    The pixel buffer is a ``bytearray`` of ``width * height * 4`` bytes,
    initially transparent black.
    """

    def __init__(self, width: int, height: int, data: bytes | None = None):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError('ImageData dimensions must be positive')
        if width * height > MAX_PIXELS:
            raise ValueError(f'ImageData of {width}x{height} pixels is too large')
        size = width * height * 4
        if data is None:
            buffer = bytearray(size)
        else:
            buffer = bytearray(data)
            if len(buffer) != size:
                raise ValueError(
                    f'ImageData buffer is {len(buffer)} bytes, expected {size}'
                )
        self.width = width
        self.height = height
        self.data = buffer

    @classmethod
    def from_image(cls, image: Image.Image) -> ImageData:
        """Create image data holding a copy of a Pillow image's pixels."""
        rgba = image.convert('RGBA')
        return cls(rgba.width, rgba.height, rgba.tobytes())

    def copy(self) -> ImageData:
        return ImageData(self.width, self.height, self.data)

    def to_image(self) -> Image.Image:
        """Return the pixels as a Pillow ``RGBA`` image."""
        return Image.frombytes('RGBA', (self.width, self.height), bytes(self.data))

    def __repr__(self):
        return f'<ImageData {self.width}x{self.height}>'
