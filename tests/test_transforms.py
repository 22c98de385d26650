import math

import pytest

from jumpover.transforms import (
    IDENTITY,
    apply_transform,
    as_transform,
    compose,
    compose_chain,
    is_identity,
    placement_transform,
    pivot_placement,
    rotation_matrix,
    rotation_of,
    scaling,
    translation,
)


def _close(p, q, tol=1e-9):
    return math.isclose(p[0], q[0], abs_tol=tol) and math.isclose(p[1], q[1], abs_tol=tol)


SKEWED = ((1.5, 0.25, -3.0), (-0.5, 2.0, 7.0))
ROTATED = ((0.6, -0.8, 10.0), (0.8, 0.6, -4.0))


def test_apply_identity_returns_point():
    assert apply_transform(IDENTITY, (3.5, -2.0)) == (3.5, -2.0)


def test_apply_uses_row_major_layout():
    assert apply_transform(((2.0, 3.0, 5.0), (7.0, 11.0, 13.0)), (1.0, 10.0)) == (37.0, 130.0)


def test_compose_matches_sequential_application():
    point = (4.0, -1.5)
    composed = compose(SKEWED, ROTATED)
    expected = apply_transform(SKEWED, apply_transform(ROTATED, point))
    assert _close(apply_transform(composed, point), expected)


def test_compose_is_associative():
    third = translation(-2.0, 9.0)
    left = compose(compose(SKEWED, ROTATED), third)
    right = compose(SKEWED, compose(ROTATED, third))
    for row_a, row_b in zip(left, right):
        for a, b in zip(row_a, row_b):
            assert math.isclose(a, b, abs_tol=1e-12)


def test_compose_chain_is_outermost_first():
    chain = compose_chain([translation(10.0, 0.0), scaling(2.0, 2.0)])
    # scale first, then translate
    assert apply_transform(chain, (1.0, 1.0)) == (12.0, 2.0)
    assert is_identity(compose_chain([]))


def test_rotation_matrix_turns_x_axis_towards_positive_y():
    assert _close(apply_transform(rotation_matrix(90.0), (1.0, 0.0)), (0.0, 1.0))


def test_placement_transform_round_trips_rotation():
    m = placement_transform(5.0, 6.0, 30.0)
    assert apply_transform(m, (0.0, 0.0)) == (5.0, 6.0)
    assert math.isclose(rotation_of(m), 30.0)


@pytest.mark.parametrize("rotation", [0.0, 30.0, 90.0, -135.0])
def test_pivot_placement_keeps_offset_on_pivot(rotation):
    m = pivot_placement((50.0, 50.0), (6.0, 6.0), rotation)
    assert _close(apply_transform(m, (6.0, 6.0)), (50.0, 50.0))
    assert math.isclose(rotation_of(m), rotation)


def test_as_transform_validates_shape():
    assert as_transform([[1, 0, 2], [0, 1, 3]]) == ((1.0, 0.0, 2.0), (0.0, 1.0, 3.0))
    with pytest.raises(ValueError):
        as_transform([[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        as_transform([[1, 0, 0]])
    with pytest.raises(ValueError):
        as_transform([[1, 0, "x"], [0, 1, 0]])
    with pytest.raises(ValueError):
        as_transform([[1, 0, float("nan")], [0, 1, 0]])
