from collections.abc import Iterator
from dataclasses import dataclass


# Integer lattice coordinates
@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle of lattice cells."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def __post_init__(self):
        if self.x_min > self.x_max:
            raise ValueError(f"x bounds inverted: {self.x_min} > {self.x_max}")
        if self.y_min > self.y_max:
            raise ValueError(f"y bounds inverted: {self.y_min} > {self.y_max}")

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def contains(self, p: Point) -> bool:
        return self.x_min <= p.x <= self.x_max and self.y_min <= p.y <= self.y_max

    def clamp(self, p: Point) -> Point:
        x = min(max(p.x, self.x_min), self.x_max)
        y = min(max(p.y, self.y_min), self.y_max)
        return p if (x, y) == (p.x, p.y) else Point(x, y)

    def cells(self) -> Iterator[Point]:
        for y in range(self.y_min, self.y_max + 1):
            for x in range(self.x_min, self.x_max + 1):
                yield Point(x, y)


def manhattan(a: Point, b: Point) -> int:
    return abs(b.x - a.x) + abs(b.y - a.y)
