"""Tests for the in-memory recording backend."""

import json

import pytest

from idmlpdf.backends.recording import RecordingBackend
from tests.conftest import BLUE, RED


def test_calls_grouped_per_page():
    backend = RecordingBackend()
    backend.begin_page(100, 200)
    backend.move_to(1, 2)
    backend.end_page()
    backend.begin_page(300, 400)
    backend.end_path()
    backend.end_page()

    assert backend.page_sizes == [(100, 200), (300, 400)]
    assert [[c.op for c in page] for page in backend.pages] == [["move_to"], ["end_path"]]
    assert backend.ops == ["move_to", "end_path"]


def test_calls_without_page_go_to_page_zero():
    backend = RecordingBackend()
    backend.fill()
    assert backend.page_sizes == [(0.0, 0.0)]
    assert backend.ops == ["fill"]


def test_unbalanced_restore_raises():
    with pytest.raises(RuntimeError):
        RecordingBackend().restore_state()


def test_page_end_with_open_state_raises():
    backend = RecordingBackend()
    backend.begin_page(10, 10)
    backend.save_state()
    with pytest.raises(RuntimeError):
        backend.end_page()


def test_json_export():
    backend = RecordingBackend()
    backend.set_fill_color(RED)
    backend.set_stroke_color(BLUE)
    backend.curve_to(1, 2, 3, 4, 5, 6)

    data = backend.to_json()
    assert json.loads(json.dumps(data)) == data
    fill, stroke, curve = data[0]
    assert fill == {"op": "set_fill_color", "args": [{"space": "cmyk", "c": 0.0, "m": 1.0, "y": 1.0, "k": 0.0}]}
    assert stroke["args"][0]["space"] == "rgb"
    assert curve == {"op": "curve_to", "args": [1, 2, 3, 4, 5, 6]}
