"""Color and object-style lookup tables.

Both tables are read-only once built and can be shared between render passes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from idmlpdf.engine.errors import ColorNotFoundError

if TYPE_CHECKING:
    from idmlpdf.engine.style import StyleOverride
    from idmlpdf.models.document import ColorRecord

logger = logging.getLogger(__name__)

# IDML stores process colors as ink percentages and RGB as 8-bit channels.
_CMYK_SCALE = 100.0
_RGB_SCALE = 255.0


def _unit(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


@dataclass(frozen=True)
class CmykColor:
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self) -> None:
        for name in ("c", "m", "y", "k"):
            object.__setattr__(self, name, _unit(getattr(self, name)))

    def to_rgb(self) -> RgbColor:
        """Naive device conversion, for backends without a CMYK color space."""
        return RgbColor(
            r=(1.0 - self.c) * (1.0 - self.k),
            g=(1.0 - self.m) * (1.0 - self.k),
            b=(1.0 - self.y) * (1.0 - self.k),
        )


@dataclass(frozen=True)
class RgbColor:
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _unit(getattr(self, name)))


Color = CmykColor | RgbColor


def color_from_values(space: str, values: Iterable[float]) -> Color | None:
    """Convert IDML color-space values (CMYK 0-100, RGB 0-255) to a Color.

    Returns None for color spaces the renderer cannot paint directly.
    """
    vals = [float(v) for v in values]
    if space == "CMYK" and len(vals) == 4:
        return CmykColor(*(v / _CMYK_SCALE for v in vals))
    if space == "RGB" and len(vals) == 3:
        return RgbColor(*(v / _RGB_SCALE for v in vals))
    return None


class ColorTable:
    """Maps swatch / color ids (e.g. ``Color/Black``) to concrete colors."""

    def __init__(self, colors: Mapping[str, Color] | None = None, none_swatch: str = "Swatch/None") -> None:
        self._colors: dict[str, Color] = dict(colors or {})
        self.none_swatch = none_swatch

    @classmethod
    def from_records(cls, records: Iterable[ColorRecord], none_swatch: str = "Swatch/None") -> ColorTable:
        colors: dict[str, Color] = {}
        for record in records:
            color = record.to_color()
            if color is None:
                logger.warning(
                    "Color %s in space %s has no CMYK/RGB representation, skipping",
                    record.id,
                    record.space,
                )
                continue
            colors[record.id] = color
        logger.debug("Loaded %d colors", len(colors))
        return cls(colors, none_swatch=none_swatch)

    def lookup_color(self, reference: str) -> Color:
        """Resolve a reference; raises ColorNotFoundError (the none swatch always does)."""
        if reference == self.none_swatch:
            raise ColorNotFoundError(reference)
        try:
            return self._colors[reference]
        except KeyError:
            raise ColorNotFoundError(reference) from None

    def __contains__(self, reference: object) -> bool:
        return reference in self._colors

    def __len__(self) -> int:
        return len(self._colors)


@dataclass(frozen=True)
class StyleRecord:
    """A named object style: its id plus the paint attributes it defines."""

    id: str
    override: StyleOverride


class StyleTable:
    """Maps object-style ids (e.g. ``ObjectStyle/Frame``) to style records."""

    def __init__(self, styles: Iterable[StyleRecord] = ()) -> None:
        self._styles: dict[str, StyleRecord] = {s.id: s for s in styles}

    def lookup_style(self, reference: str) -> StyleRecord | None:
        return self._styles.get(reference)

    def __contains__(self, reference: object) -> bool:
        return reference in self._styles

    def __len__(self) -> int:
        return len(self._styles)
