"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    item_kinds: list[str] = Field(default_factory=list)


class DiagnosticModel(BaseModel):
    item_id: str
    kind: str
    message: str


class PageCalls(BaseModel):
    width: float
    height: float
    calls: list[dict[str, Any]] = Field(default_factory=list)


class RenderResponse(BaseModel):
    pages: list[PageCalls] = Field(default_factory=list)
    drawn: list[str] = Field(default_factory=list, description="One entry per item per page it was drawn on")
    empty: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    culled: list[str] = Field(default_factory=list, description="Items lying entirely off their page")
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
