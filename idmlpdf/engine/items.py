"""Handlers for each page-item kind.

Rectangles, ovals, polygons and text-frame boxes share one path; groups recurse
with their own transform stacked on top of the ancestors'.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from idmlpdf.engine import dispatcher
from idmlpdf.engine.errors import MalformedGeometryError
from idmlpdf.engine.geometry import extract_point_array
from idmlpdf.engine.registry import item_renderer
from idmlpdf.engine.style import ResolvedPaint, resolve_paint
from idmlpdf.engine.transforms import Point2D

if TYPE_CHECKING:
    from idmlpdf.engine.pipeline import RenderPass
    from idmlpdf.engine.shapes import Group, Renderable
    from idmlpdf.engine.transforms import Transform

logger = logging.getLogger(__name__)


# Line width a backend starts each page with (PDF default)
_DEFAULT_LINE_WIDTH = 1.0


def _ink_margin(paint: ResolvedPaint) -> float:
    """Half the stroke width: how far ink reaches past the outline."""
    if not paint.stroke_present:
        return 0.0
    weight = paint.stroke_weight if paint.stroke_weight is not None else _DEFAULT_LINE_WIDTH
    return weight / 2.0


def _outside_page(
    points: np.ndarray, page_size: tuple[float, float] | None, margin: float = 0.0
) -> bool:
    if page_size is None or len(points) == 0:
        return False
    width, height = page_size
    xmin, ymin = points.min(axis=0) - margin
    xmax, ymax = points.max(axis=0) + margin
    return bool(xmax < 0 or ymax < 0 or xmin > width or ymin > height)


def render_shape(shape: Renderable, ancestor_transform: Transform, render_pass: RenderPass) -> None:
    """Resolve paint, extract geometry and dispatch one shape."""
    ctx = render_pass.context
    report = render_pass.report

    paint = resolve_paint(
        shape,
        ctx.style_table,
        ctx.color_table,
        default_stroke_weight=ctx.config.default_stroke_weight,
    )
    for unresolved in paint.unresolved:
        report.add(shape.id, "unresolved_color", str(unresolved))
        logger.warning("%s %s: %s, channel left unpainted", shape.kind, shape.id, unresolved)

    geometry = shape.path_geometry
    if geometry is None:
        report.empty.append(shape.id)
        return

    arr = extract_point_array(geometry, shape.item_transform, ancestor_transform)
    if _outside_page(arr, render_pass.page_size, _ink_margin(paint)):
        report.culled.append(shape.id)
        logger.debug("%s %s lies outside the page, not drawn", shape.kind, shape.id)
        return

    points = [Point2D(float(x), float(y)) for x, y in arr]
    try:
        outcome = dispatcher.render(render_pass.backend, paint, points, geometry.is_closed)
    except MalformedGeometryError as e:
        report.skipped.append(shape.id)
        report.add(shape.id, "malformed_geometry", str(e))
        logger.warning("%s %s skipped: %s", shape.kind, shape.id, e)
        return

    if outcome is dispatcher.RenderOutcome.EMPTY:
        report.empty.append(shape.id)
    else:
        report.drawn.append(shape.id)


for _kind, _description in (
    ("Rectangle", "Rectangle frame"),
    ("Oval", "Oval frame"),
    ("Polygon", "Polygon / graphic line"),
    ("TextFrame", "Text frame box (no glyphs)"),
):
    item_renderer(kind=_kind, description=_description)(render_shape)


@item_renderer(kind="Group", description="Group of page items sharing a transform")
def render_group(group: Group, ancestor_transform: Transform, render_pass: RenderPass) -> None:
    render_pass.draw(group.children, group.item_transform.compose(ancestor_transform))
