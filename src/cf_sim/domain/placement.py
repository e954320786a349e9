from cf_sim.app.protocols import PointSampler
from cf_sim.domain.entities.geography import Bounds, Point
from cf_sim.domain.errors import GridCapacityError


def _check_capacity(bounds: Bounds, count: int) -> None:
    if count < 0:
        raise ValueError(f"facility count must be >= 0, got {count}")
    if count > bounds.capacity:
        raise GridCapacityError(count, bounds.capacity)


class RejectionPointSampler(PointSampler):
    """
    Uniform draws over the bounds, redrawing whenever a candidate was already
    chosen. The draw budget grows with the count; once it is spent the
    remaining points come from the unchosen cells without replacement.
    """

    def __init__(self, *, bounds: Bounds, rng, max_attempts_per_point: int = 100):
        if max_attempts_per_point < 1:
            raise ValueError("max_attempts_per_point must be >= 1")
        self.bounds, self.rng = bounds, rng
        self.max_attempts_per_point = max_attempts_per_point

    def _draw(self) -> Point:
        b = self.bounds
        x = self.rng.integers(b.x_min, b.x_max + 1)
        y = self.rng.integers(b.y_min, b.y_max + 1)
        return Point(int(x), int(y))

    def sample(self, count: int) -> list[Point]:
        _check_capacity(self.bounds, count)
        chosen: dict[Point, None] = {}  # insertion-ordered set
        budget = count * self.max_attempts_per_point
        while len(chosen) < count and budget > 0:
            budget -= 1
            chosen.setdefault(self._draw(), None)
        if len(chosen) < count:
            free = [c for c in self.bounds.cells() if c not in chosen]
            idx = self.rng.choice(len(free), size=count - len(chosen), replace=False)
            chosen.update((free[int(i)], None) for i in idx)
        return list(chosen)


class ExhaustivePointSampler(PointSampler):
    """Sampling without replacement from the enumerated cells."""

    def __init__(self, *, bounds: Bounds, rng):
        self.bounds, self.rng = bounds, rng

    def sample(self, count: int) -> list[Point]:
        _check_capacity(self.bounds, count)
        cells = list(self.bounds.cells())
        idx = self.rng.choice(len(cells), size=count, replace=False)
        return [cells[int(i)] for i in idx]
