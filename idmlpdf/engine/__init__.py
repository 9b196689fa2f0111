"""idmlpdf shape rendering engine."""

from idmlpdf.engine import items as _items  # noqa: F401  (registers item handlers)
from idmlpdf.engine.context import RenderContext, RenderReport
from idmlpdf.engine.dispatcher import PaintOperation, render, select_operation
from idmlpdf.engine.geometry import PathGeometry, PathPoint, extract_points
from idmlpdf.engine.pipeline import Renderer
from idmlpdf.engine.registry import get_registry, item_renderer
from idmlpdf.engine.style import ResolvedPaint, StyleOverride, resolve_paint
from idmlpdf.engine.transforms import Point2D, Transform

__all__ = [
    "RenderContext",
    "RenderReport",
    "PaintOperation",
    "render",
    "select_operation",
    "PathGeometry",
    "PathPoint",
    "extract_points",
    "Renderer",
    "get_registry",
    "item_renderer",
    "ResolvedPaint",
    "StyleOverride",
    "resolve_paint",
    "Point2D",
    "Transform",
]
