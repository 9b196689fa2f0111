"""Drawing backend interface, the imperative path/paint API the engine drives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from idmlpdf.engine.resources import Color


class DrawingBackend(ABC):
    """One output page's current graphic state plus a path under construction.

    The engine issues calls in a fixed order per shape: ``save_state``, paint
    settings, ``move_to``, ``curve_to``..., one terminal operation,
    ``restore_state``. Implementations are not reentrant.
    """

    # --- Page lifecycle (driven by the page renderer) ---

    def begin_page(self, width: float, height: float) -> None:
        """Start a new output page of the given size in points."""

    def end_page(self) -> None:
        """Finish the current page."""

    # --- Graphic state ---

    @abstractmethod
    def save_state(self) -> None: ...

    @abstractmethod
    def restore_state(self) -> None: ...

    @abstractmethod
    def set_line_width(self, width: float) -> None: ...

    @abstractmethod
    def set_fill_color(self, color: Color) -> None: ...

    @abstractmethod
    def set_stroke_color(self, color: Color) -> None: ...

    # --- Path construction ---

    @abstractmethod
    def move_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None: ...

    # --- Terminal path operations ---

    @abstractmethod
    def fill(self) -> None: ...

    @abstractmethod
    def stroke(self) -> None: ...

    @abstractmethod
    def fill_stroke(self) -> None: ...

    @abstractmethod
    def close_path_stroke(self) -> None: ...

    @abstractmethod
    def close_path_fill_stroke(self) -> None: ...

    @abstractmethod
    def end_path(self) -> None: ...
