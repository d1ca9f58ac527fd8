import itertools
import math

import pytest

from algobox.geometry import (
    Point,
    all_within,
    distance,
    smallest_enclosing_circle,
    triangle_area,
)

FIVE_POINTS = [Point(0, 0), Point(1, 3), Point(4, 1), Point(5, 4), Point(3, -2)]
SQUARE = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
TRIANGLE = [Point(0.5, 1), Point(3.5, 3), Point(2.5, 0)]


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert distance(Point(1, 1), Point(1, 1)) == 0.0


def test_distance_is_symmetric():
    a, b = Point(-1.5, 2), Point(4, -7)
    assert distance(a, b) == distance(b, a)


def test_triangle_area():
    assert triangle_area(Point(0, 0), Point(4, 0), Point(0, 3)) == pytest.approx(6.0)


def test_degenerate_triangle_has_zero_area():
    assert triangle_area(Point(0, 0), Point(1, 1), Point(2, 2)) == pytest.approx(0.0, abs=1e-6)


def test_all_within():
    assert all_within(SQUARE, Point(1, 1), distance(Point(1, 1), Point(0, 0)))
    assert not all_within(SQUARE, Point(0, 0), 1.0)


def _check_circle(points, center, radius):
    assert all_within(points, center, radius)
    widest = max(distance(a, b) for a, b in itertools.combinations(points, 2))
    assert radius >= widest / 2 - 1e-9
    on_boundary = [p for p in points if math.isclose(distance(p, center), radius, rel_tol=1e-7)]
    assert len(on_boundary) >= 2


@pytest.mark.parametrize("points", [FIVE_POINTS, SQUARE, TRIANGLE])
def test_enclosing_circle_invariants(points):
    center, radius = smallest_enclosing_circle(points)
    _check_circle(points, center, radius)


def test_source_points_with_duplicates_at_origin():
    points = [Point()] * 5 + FIVE_POINTS
    center, radius = smallest_enclosing_circle(points)
    assert (center, radius) == smallest_enclosing_circle(FIVE_POINTS)


def test_square_circle_uses_diagonal():
    center, radius = smallest_enclosing_circle(SQUARE)
    assert radius == pytest.approx(distance(Point(0, 0), Point(2, 2)) / 2)
    assert distance(center, Point(0, 0)) == pytest.approx(distance(center, Point(2, 2)))
    assert distance(center, Point(0, 2)) == pytest.approx(distance(center, Point(2, 0)))


def test_acute_triangle_uses_circumcircle():
    center, radius = smallest_enclosing_circle(TRIANGLE)
    for p in TRIANGLE:
        assert distance(center, p) == pytest.approx(radius)


def test_two_points_give_diameter_circle():
    a, b = Point(0, 0), Point(4, 0)
    center, radius = smallest_enclosing_circle([a, b])
    assert radius == pytest.approx(2.0)
    assert distance(center, a) == pytest.approx(distance(center, b))


def test_translation_moves_center_only():
    center, radius = smallest_enclosing_circle(FIVE_POINTS)
    moved = [Point(p.x + 10, p.y - 5) for p in FIVE_POINTS]
    moved_center, moved_radius = smallest_enclosing_circle(moved)
    assert moved_radius == pytest.approx(radius)
    assert moved_center.x == pytest.approx(center.x + 10)
    assert moved_center.y == pytest.approx(center.y - 5)


def test_scaling_scales_radius():
    _, radius = smallest_enclosing_circle(TRIANGLE)
    _, scaled = smallest_enclosing_circle([Point(2 * p.x, 2 * p.y) for p in TRIANGLE])
    assert scaled == pytest.approx(2 * radius)


def test_single_point():
    p = Point(3, -1)
    assert smallest_enclosing_circle([p]) == (p, 0.0)


def test_no_points_rejected():
    with pytest.raises(ValueError):
        smallest_enclosing_circle([])