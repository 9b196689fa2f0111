"""Tests for the affine transform engine."""

import math

import numpy as np
import pytest

from idmlpdf.engine.errors import SingularMatrixError
from idmlpdf.engine.transforms import Point2D, Transform

SAMPLES = [
    Transform.identity(),
    Transform.from_components(1, 0, 0, 1, 10, 20),
    Transform.from_components(2, 0, 0, 3, -5, 7),
    Transform.from_components(math.cos(0.3), math.sin(0.3), -math.sin(0.3), math.cos(0.3), 4, -2),
    Transform.from_components(1, 0.5, 0.25, 1, 0, 0),
]

POINTS = [Point2D(0, 0), Point2D(1, 2), Point2D(-3.5, 8.25), Point2D(100, -40)]


def test_from_components_layout():
    t = Transform.from_components(1, 2, 3, 4, 5, 6)
    assert t.matrix.tolist() == [[1, 2, 0], [3, 4, 0], [5, 6, 1]]
    assert t.components == (1, 2, 3, 4, 5, 6)


def test_from_optional_vector():
    assert Transform.from_optional_vector(None) == Transform.identity()
    assert Transform.from_optional_vector([1, 0, 0, 1, 3, 4]) == Transform.translation(3, 4)


def test_from_optional_vector_rejects_wrong_arity():
    with pytest.raises(ValueError):
        Transform.from_optional_vector([1, 0, 0, 1])


def test_apply_to_point_row_vector_convention():
    t = Transform.from_components(2, 0, 0, 3, 10, 20)
    assert t.apply_to_point(Point2D(1, 1)) == Point2D(12, 23)

    # b and c mix the axes: x' = a*x + c*y + e, y' = b*x + d*y + f
    shear = Transform.from_components(1, 2, 3, 4, 0, 0)
    assert shear.apply_to_point((1, 1)) == Point2D(4, 6)


def test_apply_to_points_matches_single_point():
    t = SAMPLES[3]
    arr = t.apply_to_points(POINTS)
    for row, p in zip(arr, POINTS):
        assert tuple(row) == pytest.approx(tuple(t.apply_to_point(p)))


@pytest.mark.parametrize("t", SAMPLES)
def test_identity_is_neutral(t):
    assert t.compose(Transform.identity()) == t
    assert Transform.identity().compose(t) == t


@pytest.mark.parametrize("t", SAMPLES)
def test_inverse_round_trips_points(t):
    inv = t.invert()
    for p in POINTS:
        back = inv.apply_to_point(t.apply_to_point(p))
        assert back.x == pytest.approx(p.x, abs=1e-9)
        assert back.y == pytest.approx(p.y, abs=1e-9)


def test_composition_is_associative():
    a, b, c = SAMPLES[2], SAMPLES[3], SAMPLES[4]
    assert a.compose(b).compose(c).is_close(a.compose(b.compose(c)))


def test_composition_applies_self_first():
    scale = Transform.scaling(2, 2)
    move = Transform.translation(10, 0)
    # scale then move
    assert scale.compose(move).apply_to_point((1, 1)) == Point2D(12, 2)
    # move then scale
    assert move.compose(scale).apply_to_point((1, 1)) == Point2D(22, 2)


def test_invert_singular_matrix_raises():
    flat = Transform.from_components(1, 2, 2, 4, 0, 0)
    with pytest.raises(SingularMatrixError) as exc:
        flat.invert()
    assert exc.value.determinant == pytest.approx(0.0)


def test_singular_matrix_accepted_until_inverted():
    zero = Transform.from_components(0, 0, 0, 0, 5, 5)
    assert zero.apply_to_point((3, 4)) == Point2D(5, 5)


def test_inverse_of_inverse_is_original():
    t = SAMPLES[2]
    inv = t.invert()
    assert inv.has_inverse
    assert inv.invert() == t


def test_precomputed_inverse_is_reused():
    t = SAMPLES[3].with_precomputed_inverse()
    assert t.has_inverse
    assert t.with_precomputed_inverse() is t
    assert np.array_equal(t.invert().matrix, t.inverse)


def test_compose_keeps_known_inverses():
    a = SAMPLES[1].with_precomputed_inverse()
    b = SAMPLES[2].with_precomputed_inverse()
    ab = a.compose(b)
    assert ab.has_inverse
    assert ab.invert().is_close(Transform(np.linalg.inv(ab.matrix)))


def test_builders_do_not_mutate():
    t = Transform.from_components(1, 2, 3, 4, 5, 6)
    moved = t.with_translation(7, 8)
    assert moved.components == (1, 2, 3, 4, 7, 8)
    assert t.components == (1, 2, 3, 4, 5, 6)

    changed = t.with_linear_component(2, 9)
    assert changed.components == (1, 2, 9, 4, 5, 6)
    assert t.with_scale(3, 5).components == (3, 2, 3, 5, 5, 6)


def test_with_linear_component_bounds():
    with pytest.raises(IndexError):
        Transform.identity().with_linear_component(4, 1.0)


def test_matrix_is_read_only():
    t = Transform.identity()
    with pytest.raises(ValueError):
        t.matrix[0, 0] = 5.0


def test_rejects_non_3x3():
    with pytest.raises(ValueError):
        Transform(np.identity(2))
