"""Render configuration: numeric tolerances and swatch conventions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Knobs shared by every stage of a render pass."""

    # Determinant magnitude below which a transform counts as singular
    singular_tolerance: float = 1e-12

    # Swatch id meaning "no paint"; it never resolves to a color
    none_swatch: str = "Swatch/None"

    # Line width applied when neither the object style nor the item sets one.
    # None leaves the backend's current line width untouched.
    default_stroke_weight: float | None = None
