"""Affine transforms — 3x3 matrices in the row-vector convention.

A point is mapped as ``[x y 1] @ M``. The linear part (a, b, c, d) sits in the
upper-left 2x2 block and the translation (e, f) in the third row:

    | a  b  0 |
    | c  d  0 |
    | e  f  1 |

``A.compose(B)`` is ``A @ B``: apply A first, then B. An item's local transform
composed with its parent's therefore maps item space straight into parent space.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from idmlpdf.engine.errors import SingularMatrixError

# Absolute determinant threshold used when no tolerance is passed to invert().
_DEFAULT_SINGULAR_TOLERANCE = 1e-12

# (row, col) of a, b, c, d in the matrix
_LINEAR_SLOTS = ((0, 0), (0, 1), (1, 0), (1, 1))


class Point2D(NamedTuple):
    x: float
    y: float


def _frozen(values: ArrayLike) -> NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Transform matrix must be 3x3, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Transform:
    """Immutable affine transform.

    ``inverse`` is optional precomputed data, never filled in behind the
    caller's back. ``invert()`` hands back a transform that already knows its
    own inverse (the original matrix), and ``with_precomputed_inverse()``
    returns a copy that makes later ``invert()`` calls O(1).
    """

    matrix: NDArray[np.float64]
    inverse: NDArray[np.float64] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", _frozen(self.matrix))
        if self.inverse is not None:
            object.__setattr__(self, "inverse", _frozen(self.inverse))

    # --- Constructors ---

    @classmethod
    def identity(cls) -> Transform:
        return cls(np.identity(3), inverse=np.identity(3))

    @classmethod
    def from_components(
        cls, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> Transform:
        """Build a transform from IDML ItemTransform order (a b c d tx ty).

        Values are taken verbatim; a singular matrix only fails once inverted.
        """
        return cls(
            [
                [a, b, 0.0],
                [c, d, 0.0],
                [e, f, 1.0],
            ]
        )

    @classmethod
    def from_optional_vector(cls, values: Sequence[float] | None) -> Transform:
        """Six components, or identity when the item carries no transform."""
        if values is None:
            return cls.identity()
        if len(values) != 6:
            raise ValueError(f"Transform vector needs exactly 6 components, got {len(values)}")
        return cls.from_components(*values)

    @classmethod
    def translation(cls, x: float, y: float) -> Transform:
        return cls.identity().with_translation(x, y)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> Transform:
        return cls.identity().with_scale(sx, sy)

    # --- Accessors ---

    @property
    def components(self) -> tuple[float, float, float, float, float, float]:
        m = self.matrix
        return (
            float(m[0, 0]),
            float(m[0, 1]),
            float(m[1, 0]),
            float(m[1, 1]),
            float(m[2, 0]),
            float(m[2, 1]),
        )

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self.matrix))

    @property
    def has_inverse(self) -> bool:
        return self.inverse is not None

    # --- Algebra ---

    def compose(self, other: Transform) -> Transform:
        """``self @ other``: self's mapping followed by other's."""
        inverse = None
        if self.inverse is not None and other.inverse is not None:
            inverse = other.inverse @ self.inverse
        return Transform(self.matrix @ other.matrix, inverse=inverse)

    def invert(self, tolerance: float = _DEFAULT_SINGULAR_TOLERANCE) -> Transform:
        """Return the inverse transform; raises SingularMatrixError if none exists."""
        if self.inverse is not None:
            return Transform(self.inverse, inverse=self.matrix)
        return Transform(self._compute_inverse(tolerance), inverse=self.matrix)

    def with_precomputed_inverse(
        self, tolerance: float = _DEFAULT_SINGULAR_TOLERANCE
    ) -> Transform:
        if self.inverse is not None:
            return self
        return Transform(self.matrix, inverse=self._compute_inverse(tolerance))

    def _compute_inverse(self, tolerance: float) -> NDArray[np.float64]:
        det = self.determinant
        if not np.isfinite(det) or abs(det) <= tolerance:
            raise SingularMatrixError(self.matrix.copy(), det)
        return np.linalg.inv(self.matrix)

    # --- Point mapping ---

    def apply_to_point(self, point: Point2D | Sequence[float]) -> Point2D:
        x, y = point
        mapped = np.array([x, y, 1.0]) @ self.matrix
        return Point2D(float(mapped[0]), float(mapped[1]))

    def apply_to_points(self, points: ArrayLike) -> NDArray[np.float64]:
        """Vectorised ``apply_to_point`` over an Nx2 array."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        return (homogeneous @ self.matrix)[:, :2]

    # --- Non-destructive builders ---

    def _with_value(self, row: int, col: int, value: float) -> Transform:
        m = self.matrix.copy()
        m[row, col] = value
        return Transform(m)

    def with_linear_component(self, index: int, value: float) -> Transform:
        """Replace a (0), b (1), c (2) or d (3)."""
        if not 0 <= index < len(_LINEAR_SLOTS):
            raise IndexError(f"Linear component index must be 0..3, got {index}")
        row, col = _LINEAR_SLOTS[index]
        return self._with_value(row, col, value)

    def with_translation(self, x: float, y: float) -> Transform:
        m = self.matrix.copy()
        m[2, 0] = x
        m[2, 1] = y
        return Transform(m)

    def with_scale(self, sx: float, sy: float) -> Transform:
        return self.with_linear_component(0, sx).with_linear_component(3, sy)

    # --- Comparison ---

    def is_close(self, other: Transform, tolerance: float = 1e-9) -> bool:
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        a, b, c, d, e, f = self.components
        return f"Transform({a:g}, {b:g}, {c:g}, {d:g}, {e:g}, {f:g})"
