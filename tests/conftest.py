"""Shared test fixtures."""

from __future__ import annotations

import pytest

from idmlpdf.engine.context import RenderContext
from idmlpdf.engine.geometry import PathGeometry, PathPoint
from idmlpdf.engine.resources import CmykColor, ColorTable, RgbColor, StyleRecord, StyleTable
from idmlpdf.engine.style import StyleOverride
from idmlpdf.engine.transforms import Point2D

RED = CmykColor(0.0, 1.0, 1.0, 0.0)
BLUE = RgbColor(0.0, 0.0, 1.0)
BLACK = CmykColor(0.0, 0.0, 0.0, 1.0)


def corner(x: float, y: float) -> PathPoint:
    """A corner point the way IDML writes it: both handles sit on the anchor."""
    p = Point2D(x, y)
    return PathPoint(anchor=p, left_direction=p, right_direction=p)


def square_geometry(size: float = 100.0, closed: bool = True) -> PathGeometry:
    return PathGeometry(
        subpaths=((corner(0, 0), corner(0, size), corner(size, size), corner(size, 0)),),
        is_closed=closed,
    )


def _idml_corner(x: float, y: float) -> dict[str, str]:
    xy = f"{x} {y}"
    return {"Anchor": xy, "LeftDirection": xy, "RightDirection": xy}


def idml_square(size: float = 100.0, path_open: bool = False) -> dict:
    return {
        "PathOpen": path_open,
        "PathPointArrays": [
            [
                _idml_corner(0, 0),
                _idml_corner(0, size),
                _idml_corner(size, size),
                _idml_corner(size, 0),
            ]
        ],
    }


# A letter page centred on its spread, the way InDesign places single pages.
SAMPLE_DOCUMENT = {
    "Colors": [
        {"Self": "Color/Red", "Space": "CMYK", "ColorValue": "0 100 100 0", "Model": "Process"},
        {"Self": "Color/Blue", "Space": "RGB", "ColorValue": "0 0 255", "Model": "Process"},
        {"Self": "Color/Black", "Space": "CMYK", "ColorValue": "0 0 0 100", "Model": "Process"},
        {
            "Self": "Color/Lab",
            "Space": "LAB",
            "ColorValue": "50 20 -30",
            "AlternateSpace": "CMYK",
            "AlternateColorValue": "10 20 30 40",
        },
    ],
    "ObjectStyles": [
        {"Self": "ObjectStyle/RedFill", "Name": "Red fill", "FillColor": "Color/Red", "StrokeWeight": 2},
        {"Self": "ObjectStyle/$ID/[None]", "FillColor": "Swatch/None", "StrokeColor": "Swatch/None"},
    ],
    "Spreads": [
        {
            "Self": "sp1",
            "Pages": [
                {
                    "Self": "p1",
                    "Name": "1",
                    "GeometricBounds": "0 0 792 612",
                    "ItemTransform": "1 0 0 1 -306 -396",
                    "AppliedMaster": "n",
                }
            ],
            "Items": [
                {
                    "Kind": "Rectangle",
                    "Self": "r1",
                    "ItemTransform": "1 0 0 1 -256 -346",
                    "AppliedObjectStyle": "ObjectStyle/RedFill",
                    "StrokeColor": "Color/Black",
                    "PathGeometry": idml_square(100),
                },
                {
                    "Kind": "Group",
                    "Self": "g1",
                    "ItemTransform": "1 0 0 1 -156 -246",
                    "Children": [
                        {
                            "Kind": "Oval",
                            "Self": "o1",
                            "ItemTransform": "1 0 0 1 10 10",
                            "FillColor": "Color/Blue",
                            "PathGeometry": idml_square(20),
                        }
                    ],
                },
                {
                    "Kind": "TextFrame",
                    "Self": "t1",
                    "ParentStory": "u123",
                    "PreviousTextFrame": "n",
                    "NextTextFrame": "n",
                    "FillColor": "Color/Missing",
                    "PathGeometry": idml_square(10),
                },
            ],
        }
    ],
}


@pytest.fixture
def color_table() -> ColorTable:
    return ColorTable({"Color/Red": RED, "Color/Blue": BLUE, "Color/Black": BLACK})


@pytest.fixture
def style_table() -> StyleTable:
    return StyleTable(
        [
            StyleRecord("ObjectStyle/RedFill", StyleOverride(fill_color="Color/Red", stroke_weight=2.0)),
            StyleRecord("ObjectStyle/BlackStroke", StyleOverride(stroke_color="Color/Black")),
        ]
    )


@pytest.fixture
def render_context(color_table: ColorTable, style_table: StyleTable) -> RenderContext:
    return RenderContext(color_table=color_table, style_table=style_table)
