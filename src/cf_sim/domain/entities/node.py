from dataclasses import dataclass

from cf_sim.domain.entities.facility import Facility
from cf_sim.domain.entities.geography import Point


@dataclass(frozen=True)
class Node:
    location: Point
    facilities: tuple[Facility, ...]

    def __post_init__(self):
        if not self.facilities:
            raise ValueError(f"node at ({self.location.x},{self.location.y}) has no facilities")

    @property
    def x(self) -> int:
        return self.location.x

    @property
    def y(self) -> int:
        return self.location.y
