"""Page items the renderer knows how to draw.

The pipeline only relies on the ``Renderable`` protocol; the concrete records
below are what the document loader produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Protocol, runtime_checkable

from idmlpdf.engine.geometry import PathGeometry
from idmlpdf.engine.style import StyleOverride
from idmlpdf.engine.transforms import Transform


@runtime_checkable
class Renderable(Protocol):
    """Capabilities a page item needs for the shape render path."""

    id: str
    kind: ClassVar[str]

    @property
    def item_transform(self) -> Transform: ...

    @property
    def path_geometry(self) -> PathGeometry | None: ...

    @property
    def style_override(self) -> StyleOverride: ...

    @property
    def applied_object_style(self) -> str | None: ...


@dataclass(frozen=True)
class _ShapeItem:
    id: str
    item_transform: Transform = field(default_factory=Transform.identity)
    path_geometry: PathGeometry | None = None
    style_override: StyleOverride = field(default_factory=StyleOverride)
    applied_object_style: str | None = None

    kind: ClassVar[str] = ""

    @property
    def is_closed(self) -> bool:
        return self.path_geometry is not None and self.path_geometry.is_closed


@dataclass(frozen=True)
class Rectangle(_ShapeItem):
    kind: ClassVar[str] = "Rectangle"


@dataclass(frozen=True)
class Oval(_ShapeItem):
    kind: ClassVar[str] = "Oval"


@dataclass(frozen=True)
class Polygon(_ShapeItem):
    kind: ClassVar[str] = "Polygon"


@dataclass(frozen=True)
class TextFrame(_ShapeItem):
    """Only the frame box is drawn here; story text is laid out elsewhere."""

    parent_story: str | None = None
    previous_text_frame: str | None = None
    next_text_frame: str | None = None

    kind: ClassVar[str] = "TextFrame"


@dataclass(frozen=True)
class Group:
    """Children are positioned in the group's coordinate space."""

    id: str
    item_transform: Transform = field(default_factory=Transform.identity)
    children: tuple[PageItem, ...] = ()

    kind: ClassVar[str] = "Group"


PageItem = Rectangle | Oval | Polygon | TextFrame | Group


@dataclass(frozen=True)
class Page:
    """A page placed on its spread.

    ``geometric_bounds`` follows IDML order: (top, left, bottom, right) in the
    page's own coordinate space.
    """

    id: str
    item_transform: Transform = field(default_factory=Transform.identity)
    geometric_bounds: tuple[float, float, float, float] = (0.0, 0.0, 792.0, 612.0)
    name: str = ""
    applied_master: str | None = None

    @property
    def width(self) -> float:
        top, left, bottom, right = self.geometric_bounds
        return right - left

    @property
    def height(self) -> float:
        top, left, bottom, right = self.geometric_bounds
        return bottom - top


@dataclass(frozen=True)
class Spread:
    """Pages plus the page items laid out over them, in spread coordinates."""

    id: str
    pages: tuple[Page, ...] = ()
    items: tuple[PageItem, ...] = ()
