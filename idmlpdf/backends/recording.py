"""In-memory backend that records every drawing call."""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from idmlpdf.backends.base import DrawingBackend
from idmlpdf.engine.resources import CmykColor, Color


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        args = [_jsonable(a) for a in self.args]
        return {"op": self.op, "args": args}


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        space = "cmyk" if isinstance(value, CmykColor) else "rgb"
        return {"space": space, **asdict(value)}
    return value


class RecordingBackend(DrawingBackend):
    """Keeps calls grouped per page. Calls outside begin/end_page go to page 0."""

    def __init__(self) -> None:
        self.pages: list[list[DrawCall]] = []
        self.page_sizes: list[tuple[float, float]] = []
        self._depth = 0

    @property
    def calls(self) -> list[DrawCall]:
        """Every call across all pages, in order."""
        return [c for page in self.pages for c in page]

    @property
    def ops(self) -> list[str]:
        return [c.op for c in self.calls]

    @property
    def state_depth(self) -> int:
        return self._depth

    def _record(self, op: str, *args: Any) -> None:
        if not self.pages:
            self.pages.append([])
            self.page_sizes.append((0.0, 0.0))
        self.pages[-1].append(DrawCall(op, args))

    def begin_page(self, width: float, height: float) -> None:
        self.pages.append([])
        self.page_sizes.append((width, height))

    def end_page(self) -> None:
        if self._depth:
            raise RuntimeError(f"Page ended with {self._depth} unbalanced save_state call(s)")

    def save_state(self) -> None:
        self._depth += 1
        self._record("save_state")

    def restore_state(self) -> None:
        if self._depth == 0:
            raise RuntimeError("restore_state without matching save_state")
        self._depth -= 1
        self._record("restore_state")

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def set_fill_color(self, color: Color) -> None:
        self._record("set_fill_color", color)

    def set_stroke_color(self, color: Color) -> None:
        self._record("set_stroke_color", color)

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self._record("curve_to", x1, y1, x2, y2, x3, y3)

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    def fill_stroke(self) -> None:
        self._record("fill_stroke")

    def close_path_stroke(self) -> None:
        self._record("close_path_stroke")

    def close_path_fill_stroke(self) -> None:
        self._record("close_path_fill_stroke")

    def end_path(self) -> None:
        self._record("end_path")

    def to_json(self) -> list[list[dict[str, Any]]]:
        return [[c.to_dict() for c in page] for page in self.pages]
