import numpy as np
import pytest

from cf_sim.domain.entities.facility import Facility, IdAllocator
from cf_sim.domain.entities.geography import Bounds, Point, manhattan
from cf_sim.domain.entities.medication import MedicationKind
from cf_sim.domain.entities.node import Node
from cf_sim.domain.grid import Grid, populate
from cf_sim.domain.placement import RejectionPointSampler
from cf_sim.domain.pricing import FacilityFactory, UniformPriceSampler
from cf_sim.sim.hooks import NoopHooks

B = Bounds(-10, 10, -10, 10)


def _node(x, y, fid="001"):
    f = Facility(fid, {MedicationKind.A: 50.0, MedicationKind.B: 10.0, MedicationKind.C: 70.0})
    return Node(Point(x, y), (f,))


def _grid(*locs):
    g = Grid(B)
    for i, (x, y) in enumerate(locs, start=1):
        g.add_node(_node(x, y, f"{i:03d}"))
    return g


@pytest.fixture
def random_grid() -> Grid:
    rng = np.random.default_rng(2024)
    factory = FacilityFactory(ids=IdAllocator(), prices=UniformPriceSampler(rng=rng))
    points = RejectionPointSampler(bounds=B, rng=rng).sample(10)
    return populate(Grid(B), points, 1, factory)


# ---------- scenarios


def test_single_facility_distance():
    g = _grid((0, 0))
    out = g.find_closest(Point(3, -8), 3)
    assert len(out) == 1
    assert out[0].node.location == Point(0, 0)
    assert out[0].distance == 11


def test_equal_distances_keep_insertion_order():
    g = _grid((1, 1), (-1, -1))
    out = g.find_closest(Point(0, 0), 2)
    assert [r.distance for r in out] == [2, 2]
    assert [r.node.location for r in out] == [Point(1, 1), Point(-1, -1)]
    # repeatable for k=1
    for _ in range(3):
        assert g.find_closest(Point(0, 0), 1)[0].node.location == Point(1, 1)


def test_k_larger_than_occupied_returns_all():
    g = _grid((1, 1), (-1, -1))
    out = g.find_closest(Point(5, 5), 3)
    assert len(out) == 2
    assert {r.node.location for r in out} == {Point(1, 1), Point(-1, -1)}


def test_empty_grid_returns_empty():
    g = Grid(B)
    for k in (0, 1, 5):
        assert g.find_closest(Point(0, 0), k) == []


def test_k_zero_and_negative():
    g = _grid((0, 0))
    assert g.find_closest(Point(0, 0), 0) == []
    with pytest.raises(ValueError):
        g.find_closest(Point(0, 0), -1)


def test_query_outside_bounds_is_clamped():
    g = _grid((10, 10))
    out = g.find_closest(Point(50, 50), 1)
    assert out[0].distance == 0


# ---------- properties over a random grid


def test_results_sorted_and_sized(random_grid: Grid):
    for q in [Point(0, 0), Point(-10, 10), Point(7, -3)]:
        for k in range(0, 13):
            out = random_grid.find_closest(q, k)
            assert len(out) == min(k, len(random_grid))
            ds = [r.distance for r in out]
            assert ds == sorted(ds)
            assert all(r.distance == manhattan(r.node.location, q) for r in out)


def test_all_nodes_returned_once(random_grid: Grid):
    out = random_grid.find_closest(Point(0, 0), 100)
    assert len({id(r.node) for r in out}) == len(random_grid) == 10


def test_queries_do_not_touch_nodes(random_grid: Grid):
    before = [(n.location, n.facilities) for n in random_grid.nodes]
    random_grid.find_closest(Point(3, 3), 3)
    random_grid.find_closest(Point(-9, 2), 10)
    assert [(n.location, n.facilities) for n in random_grid.nodes] == before


def test_populated_nodes_are_valid(random_grid: Grid):
    locs = [n.location for n in random_grid.nodes]
    assert len(set(locs)) == len(locs)
    assert all(B.contains(p) for p in locs)
    ids = [f.id for n in random_grid.nodes for f in n.facilities]
    assert ids == [f"{i:03d}" for i in range(1, 11)]
    for n in random_grid.nodes:
        for f in n.facilities:
            assert set(f.prices) == set(MedicationKind)
            assert all(0.0 <= p <= 200.0 for p in f.prices.values())


# ---------- construction


def test_add_node_rejects_duplicates_and_out_of_bounds():
    g = _grid((0, 0))
    with pytest.raises(ValueError, match="occupied"):
        g.add_node(_node(0, 0))
    with pytest.raises(ValueError, match="outside"):
        g.add_node(_node(11, 0))
    assert len(g) == 1
    assert Point(0, 0) in g
    assert Point(1, 1) not in g


def test_populate_multiple_facilities_per_node():
    rng = np.random.default_rng(9)
    factory = FacilityFactory(ids=IdAllocator(), prices=UniformPriceSampler(rng=rng))
    g = populate(Grid(B), [Point(0, 0), Point(1, 2)], 2, factory)
    assert [len(n.facilities) for n in g.nodes] == [2, 2]
    assert [f.id for f in g.nodes[1].facilities] == ["003", "004"]
    with pytest.raises(ValueError):
        populate(Grid(B), [Point(0, 0)], 0, factory)


def test_render_marks_occupied_cells():
    g = Grid(Bounds(0, 2, 0, 1))
    g.add_node(_node(0, 1))
    g.add_node(_node(2, 0, "002"))
    assert g.render() == "$  .  .\n.  .  $"


class _Spy(NoopHooks):
    def __init__(self):
        self.added, self.queries = [], []

    def node_added(self, node):
        self.added.append(node.location)

    def query(self, *, query, k, results):
        self.queries.append((query, k, len(results)))


def test_hooks_see_nodes_and_clamped_queries():
    spy = _Spy()
    g = Grid(B, hooks=spy)
    g.add_node(_node(1, 1))
    g.find_closest(Point(-30, 4), 2)
    assert spy.added == [Point(1, 1)]
    assert spy.queries == [(Point(-10, 4), 2, 1)]
