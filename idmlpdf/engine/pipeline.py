"""Page renderer — walks page items in document order and drives the backend."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from idmlpdf.backends.base import DrawingBackend
from idmlpdf.engine.context import RenderContext, RenderReport
from idmlpdf.engine.errors import SingularMatrixError
from idmlpdf.engine.registry import ItemRendererRegistry, get_registry
from idmlpdf.engine.shapes import Page, PageItem, Spread
from idmlpdf.engine.transforms import Transform

logger = logging.getLogger(__name__)


@dataclass
class RenderPass:
    """State for one pass over one output page, handed to every item handler."""

    renderer: Renderer
    backend: DrawingBackend
    report: RenderReport = field(default_factory=RenderReport)
    # Output page size; items entirely outside it are not drawn
    page_size: tuple[float, float] | None = None

    @property
    def context(self) -> RenderContext:
        return self.renderer.context

    def draw(self, items: Iterable[PageItem], ancestor_transform: Transform) -> None:
        """Render items in order; later items paint over earlier ones."""
        for item in items:
            t0 = time.perf_counter()
            kind = getattr(item, "kind", type(item).__name__)
            item_id = getattr(item, "id", "?")
            try:
                spec = self.renderer.registry.get(kind)
            except KeyError:
                self.report.skipped.append(item_id)
                self.report.add(item_id, "unknown_item", f"No renderer for item kind {kind!r}")
                logger.warning("No renderer for %s %s, skipping", kind, item_id)
                continue
            try:
                spec.fn(item, ancestor_transform, self)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s %s rendered in %.1fms", kind, item_id, elapsed)
            except Exception as e:
                self.report.skipped.append(item_id)
                self.report.add(item_id, "render_error", str(e))
                logger.warning("  %s %s FAILED: %s", kind, item_id, e)


def page_placement(page: Page, tolerance: float = 1e-12) -> Transform:
    """Map spread coordinates to PDF page coordinates.

    Spread space -> page space (inverse of the page's transform), then shift the
    page's top-left bound to the origin and flip y so it points up.
    """
    top, left, _bottom, _right = page.geometric_bounds
    to_page = page.item_transform.invert(tolerance)
    flip = Transform.from_components(1.0, 0.0, 0.0, -1.0, 0.0, page.height)
    return to_page.compose(Transform.translation(-left, -top)).compose(flip)


class Renderer:
    """Renders spreads, pages or loose item lists onto a drawing backend."""

    def __init__(
        self,
        context: RenderContext | None = None,
        registry: ItemRendererRegistry | None = None,
    ) -> None:
        self.context = context or RenderContext()
        self.registry = registry or get_registry()

    def render_items(
        self,
        items: Iterable[PageItem],
        backend: DrawingBackend,
        ancestor_transform: Transform | None = None,
        report: RenderReport | None = None,
    ) -> RenderReport:
        """Draw items onto the backend's current page; no page lifecycle calls."""
        start = time.perf_counter()
        render_pass = RenderPass(self, backend, report or RenderReport())
        render_pass.draw(items, ancestor_transform or Transform.identity())
        render_pass.report.elapsed_ms += (time.perf_counter() - start) * 1000
        return render_pass.report

    def render_page(
        self,
        spread: Spread,
        page: Page,
        backend: DrawingBackend,
        report: RenderReport | None = None,
    ) -> RenderReport:
        report = report or RenderReport()
        start = time.perf_counter()
        try:
            placement = page_placement(page, self.context.config.singular_tolerance)
        except SingularMatrixError as e:
            report.add(page.id, "singular_matrix", str(e))
            logger.warning("Page %s has a singular transform, skipping: %s", page.id, e)
            return report

        backend.begin_page(page.width, page.height)
        try:
            render_pass = RenderPass(self, backend, report, page_size=(page.width, page.height))
            render_pass.draw(spread.items, placement)
        finally:
            backend.end_page()

        report.pages_rendered += 1
        elapsed = (time.perf_counter() - start) * 1000
        report.elapsed_ms += elapsed
        logger.info(
            "Page %s: %d drawn, %d skipped in %.0fms",
            page.name or page.id,
            len(report.drawn),
            len(report.skipped),
            elapsed,
        )
        return report

    def render_spread(
        self,
        spread: Spread,
        backend: DrawingBackend,
        report: RenderReport | None = None,
    ) -> RenderReport:
        report = report or RenderReport()
        for page in spread.pages:
            self.render_page(spread, page, backend, report)
        return report

    def render_document(self, spreads: Iterable[Spread], backend: DrawingBackend) -> RenderReport:
        report = RenderReport()
        for spread in spreads:
            self.render_spread(spread, backend, report)
        logger.info(
            "Render complete: %d page(s), %d item(s) drawn, %d skipped, %d diagnostic(s)",
            report.pages_rendered,
            len(report.drawn),
            len(report.skipped),
            len(report.diagnostics),
        )
        return report
