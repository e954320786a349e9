# domain/grid.py
from collections.abc import Iterable
from dataclasses import dataclass

from cf_sim.domain.entities.geography import Bounds, Point, manhattan
from cf_sim.domain.entities.node import Node
from cf_sim.domain.pricing import FacilityFactory
from cf_sim.sim.hooks import GridHooks, NoopHooks


@dataclass(frozen=True)
class Ranked:
    node: Node
    distance: int


class Grid:
    """
    Bounded lattice holding the occupied nodes, at most one per location.

    Queries never write to nodes: distances come back alongside each node.
    Equal distances keep node insertion order.
    """

    def __init__(self, bounds: Bounds, hooks: GridHooks | None = None):
        self.bounds = bounds
        self._nodes: dict[Point, Node] = {}
        self._hooks = hooks or NoopHooks()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, p: Point) -> bool:
        return p in self._nodes

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def add_node(self, node: Node) -> None:
        loc = node.location
        if not self.bounds.contains(loc):
            raise ValueError(f"({loc.x},{loc.y}) lies outside the grid bounds")
        if loc in self._nodes:
            raise ValueError(f"({loc.x},{loc.y}) is already occupied")
        self._nodes[loc] = node
        self._hooks.node_added(node)

    def clamp(self, p: Point) -> Point:
        return self.bounds.clamp(p)

    def find_closest(self, query: Point, k: int) -> list[Ranked]:
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        q = self.clamp(query)
        ranked = sorted(
            (Ranked(n, manhattan(n.location, q)) for n in self._nodes.values()),
            key=lambda r: r.distance,
        )
        out = ranked[:k]
        self._hooks.query(query=q, k=k, results=out)
        return out

    def render(self) -> str:
        b = self.bounds
        rows = []
        for y in range(b.y_max, b.y_min - 1, -1):
            xs = range(b.x_min, b.x_max + 1)
            cells = ("$" if Point(x, y) in self._nodes else "." for x in xs)
            rows.append("  ".join(cells))
        return "\n".join(rows)


def populate(
    grid: Grid, points: Iterable[Point], facilities_per_node: int, factory: FacilityFactory
) -> Grid:
    if facilities_per_node < 1:
        raise ValueError("facilities_per_node must be >= 1")
    for p in points:
        facilities = tuple(factory.create() for _ in range(facilities_per_node))
        grid.add_node(Node(p, facilities))
    return grid
