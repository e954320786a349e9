import pytest

from cf_sim.domain.entities.geography import Bounds, Point, manhattan

B = Bounds(-10, 10, -10, 10)


@pytest.mark.parametrize(
    "p, expected",
    [
        (Point(0, 0), Point(0, 0)),
        (Point(25, -3), Point(10, -3)),
        (Point(-11, 11), Point(-10, 10)),
        (Point(-100, -100), Point(-10, -10)),
        (Point(10, 10), Point(10, 10)),
    ],
)
def test_clamp_lands_inside_bounds(p, expected):
    q = B.clamp(p)
    assert q == expected
    assert B.contains(q)
    assert B.clamp(q) == q  # idempotent


def test_points_compare_by_value():
    assert Point(3, -8) == Point(3, -8)
    assert len({Point(1, 1), Point(1, 1), Point(-1, -1)}) == 2


def test_manhattan_symmetric_and_zero_on_self():
    a, b = Point(3, -8), Point(-4, 2)
    assert manhattan(a, b) == manhattan(b, a) == 17
    assert manhattan(a, a) == 0
    assert manhattan(Point(0, 0), Point(3, -8)) == 11


def test_capacity_and_cells():
    b = Bounds(-1, 1, 0, 1)
    assert (b.width, b.height, b.capacity) == (3, 2, 6)
    cells = list(b.cells())
    assert len(cells) == len(set(cells)) == 6
    assert cells[0] == Point(-1, 0)
    assert cells[-1] == Point(1, 1)
    assert Bounds(-10, 10, -10, 10).capacity == 441


def test_inverted_bounds_rejected():
    with pytest.raises(ValueError):
        Bounds(1, 0, 0, 0)
    with pytest.raises(ValueError):
        Bounds(0, 0, 5, -5)
