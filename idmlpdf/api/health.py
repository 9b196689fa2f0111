"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from idmlpdf import __version__
from idmlpdf.engine import get_registry
from idmlpdf.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        item_kinds=get_registry().kinds(),
    )
