"""Paint resolution: object style defaults overridden by item attributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from idmlpdf.engine.errors import ColorNotFoundError, UnresolvedColorError

if TYPE_CHECKING:
    from idmlpdf.engine.resources import Color, ColorTable, StyleTable
    from idmlpdf.engine.shapes import Renderable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleOverride:
    """Paint attributes defined by one cascade layer; None means "not defined here"."""

    fill_color: str | None = None
    stroke_color: str | None = None
    stroke_weight: float | None = None

    def __post_init__(self) -> None:
        if self.stroke_weight is not None and self.stroke_weight < 0:
            raise ValueError(f"Stroke weight must not be negative, got {self.stroke_weight}")

    def merged_over(self, base: StyleOverride) -> StyleOverride:
        """Fields defined on self win; undefined ones fall through to base."""
        return StyleOverride(
            fill_color=self.fill_color if self.fill_color is not None else base.fill_color,
            stroke_color=self.stroke_color if self.stroke_color is not None else base.stroke_color,
            stroke_weight=self.stroke_weight if self.stroke_weight is not None else base.stroke_weight,
        )


@dataclass(frozen=True)
class ResolvedPaint:
    """Concrete paint for one shape. A channel that is None draws nothing."""

    fill: Color | None = None
    stroke: Color | None = None
    stroke_weight: float | None = None
    unresolved: tuple[UnresolvedColorError, ...] = field(default_factory=tuple)

    @property
    def fill_present(self) -> bool:
        return self.fill is not None

    @property
    def stroke_present(self) -> bool:
        return self.stroke is not None


def cascade(shape: Renderable, style_table: StyleTable) -> StyleOverride:
    """Symbolic paint for a shape: defaults, then named style, then the shape itself."""
    effective = StyleOverride()
    style_id = shape.applied_object_style
    if style_id:
        style = style_table.lookup_style(style_id)
        if style is None:
            logger.debug("Object style %s not found, using defaults", style_id)
        else:
            effective = style.override.merged_over(effective)
    return shape.style_override.merged_over(effective)


def _resolve_channel(
    channel: str,
    reference: str | None,
    color_table: ColorTable,
) -> tuple[Color | None, UnresolvedColorError | None]:
    if reference is None or reference == color_table.none_swatch:
        return None, None
    try:
        return color_table.lookup_color(reference), None
    except ColorNotFoundError:
        return None, UnresolvedColorError(channel, reference)


def resolve_paint(
    shape: Renderable,
    style_table: StyleTable,
    color_table: ColorTable,
    default_stroke_weight: float | None = None,
) -> ResolvedPaint:
    """Compute fill, stroke and stroke weight for a shape.

    Unresolvable color references degrade that channel to "no paint" and are
    reported on ``ResolvedPaint.unresolved``.
    """
    effective = cascade(shape, style_table)

    fill, fill_error = _resolve_channel("fill", effective.fill_color, color_table)
    stroke, stroke_error = _resolve_channel("stroke", effective.stroke_color, color_table)
    unresolved = tuple(e for e in (fill_error, stroke_error) if e is not None)

    weight = effective.stroke_weight
    if weight is None:
        weight = default_stroke_weight

    return ResolvedPaint(fill=fill, stroke=stroke, stroke_weight=weight, unresolved=unresolved)
