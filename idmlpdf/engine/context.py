"""RenderContext — read-only lookups threaded through a render pass.

RenderReport — the mutable record of what one pass drew and skipped.
Lookups live on the context, per-pass results on the report, so several
documents can be rendered side by side without shared state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from idmlpdf.engine.config import RenderConfig
from idmlpdf.engine.resources import ColorTable, StyleTable


@dataclass(frozen=True)
class RenderContext:
    """Color and style tables plus config for one document."""

    color_table: ColorTable = field(default_factory=ColorTable)
    style_table: StyleTable = field(default_factory=StyleTable)
    config: RenderConfig = field(default_factory=RenderConfig)


@dataclass(frozen=True)
class Diagnostic:
    """Something the renderer worked around for one item or page."""

    item_id: str
    kind: str  # malformed_geometry, unresolved_color, singular_matrix, unknown_item, render_error
    message: str


@dataclass
class RenderReport:
    """Outcome of one render pass.

    ``drawn``, ``empty`` and ``culled`` get one entry per page an item was
    rendered on, so an item spanning two pages of a spread appears twice.
    ``drawn_items`` lists each drawn item once.
    """

    drawn: list[str] = field(default_factory=list)
    empty: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    # Entirely off the page, ink included
    culled: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    pages_rendered: int = 0
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.skipped

    @property
    def drawn_items(self) -> list[str]:
        return list(dict.fromkeys(self.drawn))

    def add(self, item_id: str, kind: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(item_id=item_id, kind=kind, message=message))

    def diagnostics_for(self, item_id: str) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.item_id == item_id]

    def merge(self, other: RenderReport) -> None:
        self.drawn.extend(other.drawn)
        self.empty.extend(other.empty)
        self.skipped.extend(other.skipped)
        self.culled.extend(other.culled)
        self.diagnostics.extend(other.diagnostics)
        self.pages_rendered += other.pages_rendered
        self.elapsed_ms += other.elapsed_ms
