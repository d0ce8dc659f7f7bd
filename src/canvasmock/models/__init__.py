# SPDX-FileCopyrightText: 2025 James R. Barlow
# SPDX-License-Identifier: MPL-2.0

"""Value types passed into and returned from the 2D context."""

from __future__ import annotations

from canvasmock.models.image import ImageData, ImageSource, SourceKind
from canvasmock.models.matrix import Matrix, is_matrix_like
from canvasmock.models.resources import CanvasGradient, CanvasPattern, TextMetrics

__all__ = [
    'CanvasGradient',
    'CanvasPattern',
    'ImageData',
    'ImageSource',
    'is_matrix_like',
    'Matrix',
    'SourceKind',
    'TextMetrics',
]
