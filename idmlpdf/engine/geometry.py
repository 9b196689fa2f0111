"""Path geometry records and Bezier control-point extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from idmlpdf.engine.transforms import Point2D, Transform


@dataclass(frozen=True)
class PathPoint:
    """One anchor with its optional incoming (left) and outgoing (right) handles."""

    anchor: Point2D | None = None
    left_direction: Point2D | None = None
    right_direction: Point2D | None = None

    def ordered(self) -> list[Point2D]:
        """Present points in drawing order: incoming handle, anchor, outgoing handle."""
        return [
            p
            for p in (self.left_direction, self.anchor, self.right_direction)
            if p is not None
        ]


@dataclass(frozen=True)
class PathGeometry:
    """Sub-paths of a shape plus whether the outline is closed."""

    subpaths: tuple[tuple[PathPoint, ...], ...] = field(default_factory=tuple)
    is_closed: bool = False

    @classmethod
    def from_open_flag(cls, subpaths, path_open: bool) -> PathGeometry:
        """IDML records ``PathOpen``; the renderer works with its negation."""
        return cls(tuple(tuple(sp) for sp in subpaths), is_closed=not path_open)

    @property
    def point_count(self) -> int:
        return sum(len(pp.ordered()) for sp in self.subpaths for pp in sp)

    @property
    def is_empty(self) -> bool:
        return self.point_count == 0


def extract_point_array(
    geometry: PathGeometry,
    shape_transform: Transform,
    ancestor_transform: Transform,
) -> NDArray[np.float64]:
    """Nx2 array of transformed control points, all sub-paths concatenated."""
    raw = [p for sp in geometry.subpaths for pp in sp for p in pp.ordered()]
    if not raw:
        return np.empty((0, 2))
    effective = shape_transform.compose(ancestor_transform)
    return effective.apply_to_points(raw)


def extract_points(
    geometry: PathGeometry,
    shape_transform: Transform,
    ancestor_transform: Transform,
) -> list[Point2D]:
    """Flatten a shape's geometry into transformed Bezier control points.

    Each path point contributes up to three points (left handle, anchor, right
    handle) in that order; missing handles are skipped, not replaced by the
    anchor. The local transform is applied before the ancestor transform.
    """
    arr = extract_point_array(geometry, shape_transform, ancestor_transform)
    return [Point2D(float(x), float(y)) for x, y in arr]
