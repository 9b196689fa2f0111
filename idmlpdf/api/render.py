"""POST /api/render — draw a parsed document as recorded calls or as a PDF."""

from __future__ import annotations

import io
import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from idmlpdf.backends.base import DrawingBackend
from idmlpdf.backends.recording import RecordingBackend
from idmlpdf.config import Settings
from idmlpdf.dependencies import get_settings
from idmlpdf.engine import RenderReport, Renderer
from idmlpdf.engine.shapes import Spread
from idmlpdf.models.requests import RenderRequest
from idmlpdf.models.responses import DiagnosticModel, PageCalls, RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _spreads(req: RenderRequest) -> list[Spread]:
    spreads = req.document.to_spreads()
    if req.spread_ids is None:
        return spreads
    wanted = set(req.spread_ids)
    missing = wanted - {s.id for s in spreads}
    if missing:
        raise HTTPException(status_code=404, detail=f"Unknown spread id(s): {sorted(missing)}")
    return [s for s in spreads if s.id in wanted]


def _render(req: RenderRequest, settings: Settings, backend: DrawingBackend) -> RenderReport:
    try:
        spreads = _spreads(req)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    context = req.document.render_context(settings.render_config())
    return Renderer(context).render_document(spreads, backend)


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    start = time.perf_counter()

    backend = RecordingBackend()
    report = _render(req, settings, backend)

    elapsed = (time.perf_counter() - start) * 1000

    pages = [
        PageCalls(width=w, height=h, calls=calls)
        for (w, h), calls in zip(backend.page_sizes, backend.to_json())
    ]
    return RenderResponse(
        pages=pages,
        drawn=report.drawn,
        empty=report.empty,
        skipped=report.skipped,
        culled=report.culled,
        diagnostics=[DiagnosticModel(item_id=d.item_id, kind=d.kind, message=d.message) for d in report.diagnostics],
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/render/pdf")
async def render_pdf(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    from idmlpdf.backends.cairo_pdf import CairoPdfBackend

    buffer = io.BytesIO()
    with CairoPdfBackend(buffer) as backend:
        report = _render(req, settings, backend)

    if report.pages_rendered == 0:
        raise HTTPException(status_code=422, detail="Document has no renderable pages")

    logger.info("Rendered PDF: %d page(s), %d bytes", report.pages_rendered, buffer.tell())
    return Response(
        content=buffer.getvalue(),
        media_type="application/pdf",
        headers={
            "X-Items-Drawn": str(len(report.drawn_items)),
            "X-Items-Skipped": str(len(report.skipped)),
        },
    )
