"""Tests for paint resolution (object style cascade)."""

import pytest

from idmlpdf.engine.resources import ColorTable, StyleTable
from idmlpdf.engine.shapes import Rectangle
from idmlpdf.engine.style import StyleOverride, cascade, resolve_paint
from tests.conftest import BLACK, BLUE, RED


def _shape(style: str | None = None, **override) -> Rectangle:
    return Rectangle(id="r1", style_override=StyleOverride(**override), applied_object_style=style)


def test_shape_override_beats_style(style_table, color_table):
    paint = resolve_paint(_shape("ObjectStyle/RedFill", fill_color="Color/Blue"), style_table, color_table)
    assert paint.fill == BLUE


def test_style_alone_applies(style_table, color_table):
    paint = resolve_paint(_shape("ObjectStyle/RedFill"), style_table, color_table)
    assert paint.fill == RED
    assert paint.stroke is None
    assert paint.stroke_weight == 2.0


def test_neither_gives_no_paint(style_table, color_table):
    paint = resolve_paint(_shape(), style_table, color_table)
    assert paint.fill is None
    assert paint.stroke is None
    assert paint.stroke_weight is None
    assert paint.unresolved == ()


def test_fields_override_independently(style_table, color_table):
    shape = _shape("ObjectStyle/RedFill", stroke_color="Color/Black", stroke_weight=0.5)
    paint = resolve_paint(shape, style_table, color_table)
    assert paint.fill == RED
    assert paint.stroke == BLACK
    assert paint.stroke_weight == 0.5


def test_missing_style_is_not_an_error(style_table, color_table):
    paint = resolve_paint(_shape("ObjectStyle/Nope", stroke_color="Color/Black"), style_table, color_table)
    assert paint.stroke == BLACK
    assert paint.unresolved == ()


def test_unresolved_color_degrades_channel(style_table, color_table):
    paint = resolve_paint(
        _shape(fill_color="Color/Missing", stroke_color="Color/Black"), style_table, color_table
    )
    assert not paint.fill_present
    assert paint.stroke_present
    assert len(paint.unresolved) == 1
    assert paint.unresolved[0].channel == "fill"
    assert paint.unresolved[0].reference == "Color/Missing"


def test_none_swatch_means_no_paint(style_table, color_table):
    shape = _shape("ObjectStyle/RedFill", fill_color="Swatch/None")
    paint = resolve_paint(shape, style_table, color_table)
    assert paint.fill is None
    assert paint.unresolved == ()


def test_default_stroke_weight_only_when_unset(style_table, color_table):
    assert resolve_paint(_shape(), style_table, color_table, default_stroke_weight=1.0).stroke_weight == 1.0
    paint = resolve_paint(_shape("ObjectStyle/RedFill"), style_table, color_table, default_stroke_weight=1.0)
    assert paint.stroke_weight == 2.0


def test_cascade_keeps_symbolic_references(style_table):
    effective = cascade(_shape("ObjectStyle/BlackStroke", fill_color="Color/Red"), style_table)
    assert effective == StyleOverride(fill_color="Color/Red", stroke_color="Color/Black")


def test_empty_tables():
    paint = resolve_paint(_shape("ObjectStyle/RedFill", fill_color="Color/Red"), StyleTable(), ColorTable())
    assert paint.fill is None
    assert [e.reference for e in paint.unresolved] == ["Color/Red"]


def test_negative_stroke_weight_rejected():
    with pytest.raises(ValueError):
        StyleOverride(stroke_weight=-1.0)
