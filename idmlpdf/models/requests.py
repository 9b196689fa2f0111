"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from idmlpdf.models.document import DocumentRecord


class RenderRequest(BaseModel):
    document: DocumentRecord = Field(..., description="Parsed IDML document: colors, object styles, spreads")
    spread_ids: list[str] | None = Field(
        default=None,
        description="Only render these spreads (document order is kept); all when omitted",
    )
