"""Error types raised and recorded by the rendering engine."""

from __future__ import annotations

from typing import Any


class IdmlPdfError(Exception):
    """Base class for every error the engine raises."""


class SingularMatrixError(IdmlPdfError, ValueError):
    """Inversion was requested on a transform with a (near) zero determinant."""

    def __init__(self, matrix: Any, determinant: float) -> None:
        self.matrix = matrix
        self.determinant = determinant
        super().__init__(f"Cannot invert transform with determinant {determinant:g}")


class ColorNotFoundError(IdmlPdfError, KeyError):
    """A color reference has no entry in the color table."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(reference)

    def __str__(self) -> str:
        return f"Color {self.reference!r} not found"


class UnresolvedColorError(IdmlPdfError):
    """A paint channel whose color reference could not be resolved.

    Stored on ResolvedPaint instead of being raised: the channel draws nothing
    and the shape still renders with its remaining channels.
    """

    def __init__(self, channel: str, reference: str) -> None:
        self.channel = channel
        self.reference = reference
        super().__init__(f"{channel} color {reference!r} could not be resolved")


class MalformedGeometryError(IdmlPdfError):
    """Extracted points do not align into cubic Bezier triples."""

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__(
            f"{point_count} path points cannot be grouped into curve segments "
            "(expected a multiple of 3)"
        )
