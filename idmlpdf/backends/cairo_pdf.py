"""PDF output through cairo.

Coordinates handed to this backend are PDF page coordinates (origin bottom-left,
y up). Cairo's user space is y-down, so every page starts with a vertical flip.
"""

from __future__ import annotations

import logging
from typing import IO

import cairo

from idmlpdf.backends.base import DrawingBackend
from idmlpdf.engine.resources import CmykColor, Color, RgbColor

logger = logging.getLogger(__name__)

_BLACK = RgbColor(0.0, 0.0, 0.0)

# PDF's initial line width; cairo would otherwise start at 2.0
_PDF_DEFAULT_LINE_WIDTH = 1.0


def _rgb(color: Color) -> RgbColor:
    if isinstance(color, CmykColor):
        return color.to_rgb()
    return color


class CairoPdfBackend(DrawingBackend):
    """Writes one PDF page per begin_page/end_page pair.

    Cairo has a single paint source, so fill and stroke colors are tracked here
    and saved/restored alongside cairo's own graphic state.
    """

    def __init__(self, target: str | IO[bytes]) -> None:
        self._target = target
        self._surface: cairo.PDFSurface | None = None
        self._ctx: cairo.Context | None = None
        self._fill: RgbColor = _BLACK
        self._stroke: RgbColor = _BLACK
        self._saved: list[tuple[RgbColor, RgbColor]] = []
        self.page_count = 0

    def __enter__(self) -> CairoPdfBackend:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def context(self) -> cairo.Context:
        if self._ctx is None:
            raise RuntimeError("No page started; call begin_page() first")
        return self._ctx

    def begin_page(self, width: float, height: float) -> None:
        if self._surface is None:
            self._surface = cairo.PDFSurface(self._target, width, height)
            self._ctx = cairo.Context(self._surface)
        else:
            self._surface.set_size(width, height)
        ctx = self.context
        ctx.identity_matrix()
        ctx.transform(cairo.Matrix(1.0, 0.0, 0.0, -1.0, 0.0, height))
        ctx.set_line_width(_PDF_DEFAULT_LINE_WIDTH)
        self._fill = _BLACK
        self._stroke = _BLACK
        self._saved.clear()

    def end_page(self) -> None:
        self.context.show_page()
        self.page_count += 1

    def close(self) -> None:
        if self._surface is not None:
            self._surface.finish()
            logger.info("Wrote PDF with %d page(s)", self.page_count)
            self._surface = None
            self._ctx = None

    # --- Graphic state ---

    def save_state(self) -> None:
        self.context.save()
        self._saved.append((self._fill, self._stroke))

    def restore_state(self) -> None:
        self.context.restore()
        self._fill, self._stroke = self._saved.pop()

    def set_line_width(self, width: float) -> None:
        self.context.set_line_width(width)

    def set_fill_color(self, color: Color) -> None:
        self._fill = _rgb(color)

    def set_stroke_color(self, color: Color) -> None:
        self._stroke = _rgb(color)

    # --- Path construction ---

    def move_to(self, x: float, y: float) -> None:
        self.context.move_to(x, y)

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self.context.curve_to(x1, y1, x2, y2, x3, y3)

    # --- Terminal path operations ---

    def _use(self, color: RgbColor) -> None:
        self.context.set_source_rgb(color.r, color.g, color.b)

    def fill(self) -> None:
        self._use(self._fill)
        self.context.fill()

    def stroke(self) -> None:
        self._use(self._stroke)
        self.context.stroke()

    def fill_stroke(self) -> None:
        ctx = self.context
        self._use(self._fill)
        ctx.fill_preserve()
        self._use(self._stroke)
        ctx.stroke()

    def close_path_stroke(self) -> None:
        self.context.close_path()
        self.stroke()

    def close_path_fill_stroke(self) -> None:
        self.context.close_path()
        self.fill_stroke()

    def end_path(self) -> None:
        self.context.new_path()
