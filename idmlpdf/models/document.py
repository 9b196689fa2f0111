"""Already-parsed document records and their conversion into engine types.

Field names accept both snake_case and the IDML attribute spelling
(``ItemTransform``, ``FillColor``, ``Self``...). Numeric lists may be given as
JSON arrays or as IDML's space-separated strings.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from idmlpdf.engine.config import RenderConfig
from idmlpdf.engine.context import RenderContext
from idmlpdf.engine.geometry import PathGeometry, PathPoint
from idmlpdf.engine.resources import Color, ColorTable, StyleRecord, StyleTable, color_from_values
from idmlpdf.engine.shapes import Group, Oval, Page, PageItem, Polygon, Rectangle, Spread, TextFrame
from idmlpdf.engine.style import StyleOverride
from idmlpdf.engine.transforms import Point2D, Transform


def _space_separated(value: Any) -> Any:
    """``"1 0 0 1 10 20"`` -> ``[1.0, 0.0, 0.0, 1.0, 10.0, 20.0]``; empty string -> None."""
    if isinstance(value, str):
        parts = value.split()
        if not parts:
            return None
        return [float(p) for p in parts]
    return value


def _reference(value: Any) -> Any:
    """IDML writes a missing reference as ``""`` or ``"n"``."""
    if value is None:
        return None
    text = str(value).strip()
    if text in ("", "n"):
        return None
    return text


def _check_transform(value: list[float] | None) -> list[float] | None:
    if value is not None and len(value) != 6:
        raise ValueError(f"ItemTransform needs 6 values, got {len(value)}")
    return value


Reference = Annotated[str | None, BeforeValidator(_reference)]
NumberList = Annotated[list[float] | None, BeforeValidator(_space_separated)]
Coordinate = Annotated[tuple[float, float] | None, BeforeValidator(_space_separated)]
Bounds = Annotated[tuple[float, float, float, float], BeforeValidator(_space_separated)]
TransformValues = Annotated[
    list[float] | None, BeforeValidator(_space_separated), AfterValidator(_check_transform)
]


class IdmlRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class PathPointRecord(IdmlRecord):
    anchor: Coordinate = None
    left_direction: Coordinate = None
    right_direction: Coordinate = None

    def to_path_point(self) -> PathPoint:
        return PathPoint(
            anchor=Point2D(*self.anchor) if self.anchor else None,
            left_direction=Point2D(*self.left_direction) if self.left_direction else None,
            right_direction=Point2D(*self.right_direction) if self.right_direction else None,
        )


class PathGeometryRecord(IdmlRecord):
    path_open: bool = False
    path_point_arrays: list[list[PathPointRecord]] = Field(default_factory=list)

    def to_geometry(self) -> PathGeometry:
        subpaths = [[pp.to_path_point() for pp in arr] for arr in self.path_point_arrays]
        return PathGeometry.from_open_flag(subpaths, self.path_open)


class ColorRecord(IdmlRecord):
    id: str = Field(alias="Self")
    space: Literal["CMYK", "RGB", "LAB", "MixedInk", "NoAlternateColor"] = "CMYK"
    color_value: NumberList = None
    alternate_space: Literal["CMYK", "RGB", "LAB", "MixedInk", "NoAlternateColor"] | None = None
    alternate_color_value: NumberList = None
    model: Literal["Spot", "Process", "Registration"] | None = None
    base_color: Reference = None

    def to_color(self) -> Color | None:
        """Paintable color, falling back to the alternate space for LAB / mixed inks."""
        color = color_from_values(self.space, self.color_value or [])
        if color is None and self.alternate_space:
            color = color_from_values(self.alternate_space, self.alternate_color_value or [])
        return color


class ObjectStyleRecord(IdmlRecord):
    id: str = Field(alias="Self")
    name: str = ""
    fill_color: Reference = None
    stroke_color: Reference = None
    stroke_weight: float | None = Field(default=None, ge=0)

    def to_style_record(self) -> StyleRecord:
        return StyleRecord(
            id=self.id,
            override=StyleOverride(
                fill_color=self.fill_color,
                stroke_color=self.stroke_color,
                stroke_weight=self.stroke_weight,
            ),
        )


_SHAPE_CLASSES = {
    "Rectangle": Rectangle,
    "Oval": Oval,
    "Polygon": Polygon,
    "TextFrame": TextFrame,
}


class PageItemRecord(IdmlRecord):
    kind: Literal["Rectangle", "Oval", "Polygon", "TextFrame", "Group"]
    id: str = Field(alias="Self")
    item_transform: TransformValues = None
    fill_color: Reference = None
    stroke_color: Reference = None
    stroke_weight: float | None = Field(default=None, ge=0)
    applied_object_style: Reference = None
    path_geometry: PathGeometryRecord | None = None
    # TextFrame threading
    parent_story: Reference = None
    previous_text_frame: Reference = None
    next_text_frame: Reference = None
    # Group contents
    children: list[PageItemRecord] = Field(default_factory=list)

    def to_item(self) -> PageItem:
        transform = Transform.from_optional_vector(self.item_transform)
        if self.kind == "Group":
            return Group(
                id=self.id,
                item_transform=transform,
                children=tuple(c.to_item() for c in self.children),
            )

        kwargs: dict[str, Any] = dict(
            id=self.id,
            item_transform=transform,
            path_geometry=self.path_geometry.to_geometry() if self.path_geometry else None,
            style_override=StyleOverride(
                fill_color=self.fill_color,
                stroke_color=self.stroke_color,
                stroke_weight=self.stroke_weight,
            ),
            applied_object_style=self.applied_object_style,
        )
        if self.kind == "TextFrame":
            kwargs.update(
                parent_story=self.parent_story,
                previous_text_frame=self.previous_text_frame,
                next_text_frame=self.next_text_frame,
            )
        return _SHAPE_CLASSES[self.kind](**kwargs)


class PageRecord(IdmlRecord):
    id: str = Field(alias="Self")
    name: str = ""
    item_transform: TransformValues = None
    geometric_bounds: Bounds = (0.0, 0.0, 792.0, 612.0)
    applied_master: Reference = None

    def to_page(self) -> Page:
        return Page(
            id=self.id,
            item_transform=Transform.from_optional_vector(self.item_transform),
            geometric_bounds=self.geometric_bounds,
            name=self.name,
            applied_master=self.applied_master,
        )


class SpreadRecord(IdmlRecord):
    id: str = Field(alias="Self")
    pages: list[PageRecord] = Field(default_factory=list)
    items: list[PageItemRecord] = Field(default_factory=list)

    def to_spread(self) -> Spread:
        return Spread(
            id=self.id,
            pages=tuple(p.to_page() for p in self.pages),
            items=tuple(i.to_item() for i in self.items),
        )


class DocumentRecord(IdmlRecord):
    """Everything the renderer needs from one parsed IDML package."""

    colors: list[ColorRecord] = Field(default_factory=list)
    object_styles: list[ObjectStyleRecord] = Field(default_factory=list)
    spreads: list[SpreadRecord] = Field(default_factory=list)

    def color_table(self, none_swatch: str = "Swatch/None") -> ColorTable:
        return ColorTable.from_records(self.colors, none_swatch=none_swatch)

    def style_table(self) -> StyleTable:
        return StyleTable(s.to_style_record() for s in self.object_styles)

    def to_spreads(self) -> list[Spread]:
        return [s.to_spread() for s in self.spreads]

    def render_context(self, config: RenderConfig | None = None) -> RenderContext:
        config = config or RenderConfig()
        return RenderContext(
            color_table=self.color_table(config.none_swatch),
            style_table=self.style_table(),
            config=config,
        )
