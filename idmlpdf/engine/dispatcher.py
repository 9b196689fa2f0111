"""Render dispatcher — turns resolved paint + control points into backend calls."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

from idmlpdf.engine.errors import MalformedGeometryError
from idmlpdf.engine.transforms import Point2D

if TYPE_CHECKING:
    from idmlpdf.backends.base import DrawingBackend
    from idmlpdf.engine.style import ResolvedPaint

logger = logging.getLogger(__name__)


class PaintOperation(enum.Enum):
    """Terminal path operations. Values match DrawingBackend method names."""

    FILL = "fill"
    STROKE = "stroke"
    FILL_STROKE = "fill_stroke"
    CLOSE_PATH_STROKE = "close_path_stroke"
    CLOSE_PATH_FILL_STROKE = "close_path_fill_stroke"
    END_PATH = "end_path"


class RenderOutcome(enum.Enum):
    DRAWN = "drawn"
    EMPTY = "empty"


# (is_closed, fill_present, stroke_present) -> operation
_OPERATION_TABLE: dict[tuple[bool, bool, bool], PaintOperation] = {
    (False, True, False): PaintOperation.FILL,
    (True, True, False): PaintOperation.FILL,
    (False, False, True): PaintOperation.STROKE,
    (False, True, True): PaintOperation.FILL_STROKE,
    (True, False, True): PaintOperation.CLOSE_PATH_STROKE,
    (True, True, True): PaintOperation.CLOSE_PATH_FILL_STROKE,
    (False, False, False): PaintOperation.END_PATH,
    (True, False, False): PaintOperation.END_PATH,
}


def select_operation(is_closed: bool, fill_present: bool, stroke_present: bool) -> PaintOperation:
    return _OPERATION_TABLE[(bool(is_closed), bool(fill_present), bool(stroke_present))]


def bezier_segments(
    points: Sequence[Point2D],
) -> tuple[Point2D, list[tuple[Point2D, Point2D, Point2D]]]:
    """Split extracted points into a start point and cubic segments.

    Points arrive as (incoming, anchor, outgoing) per anchor. Rotating right by
    one puts the last outgoing handle in front, so every consecutive triple reads
    (previous outgoing, next incoming, next anchor). The path starts at the last
    point of the rotated sequence, which is the final anchor.
    """
    if len(points) % 3 != 0:
        raise MalformedGeometryError(len(points))
    rotated = list(points[-1:]) + list(points[:-1])
    segments = [
        (rotated[i], rotated[i + 1], rotated[i + 2])
        for i in range(0, len(rotated), 3)
    ]
    return rotated[-1], segments


@contextmanager
def graphic_state(backend: DrawingBackend) -> Iterator[DrawingBackend]:
    """Isolate one shape's line width and colors from its siblings."""
    backend.save_state()
    try:
        yield backend
    finally:
        backend.restore_state()


def render(
    backend: DrawingBackend,
    paint: ResolvedPaint,
    points: Sequence[Point2D],
    is_closed: bool,
) -> RenderOutcome:
    """Draw one shape.

    Raises MalformedGeometryError before touching the backend, so a skipped
    shape leaves no partial state behind.
    """
    if not points:
        return RenderOutcome.EMPTY

    start, segments = bezier_segments(points)
    operation = select_operation(is_closed, paint.fill_present, paint.stroke_present)

    with graphic_state(backend):
        if paint.stroke_weight is not None:
            backend.set_line_width(paint.stroke_weight)
        if paint.fill is not None:
            backend.set_fill_color(paint.fill)
        if paint.stroke is not None:
            backend.set_stroke_color(paint.stroke)

        backend.move_to(start.x, start.y)
        for c1, c2, end in segments:
            backend.curve_to(c1.x, c1.y, c2.x, c2.y, end.x, end.y)

        getattr(backend, operation.value)()

    logger.debug("Drew %d segments with %s", len(segments), operation.value)
    return RenderOutcome.DRAWN
