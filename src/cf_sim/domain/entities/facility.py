# domain/entities/facility.py
import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cf_sim.domain.entities.medication import MedicationKind


@dataclass(frozen=True)
class Facility:
    id: str
    prices: Mapping[MedicationKind, float]  # one entry per kind, catalog order

    def __post_init__(self):
        if set(self.prices) != set(MedicationKind):
            raise ValueError(f"facility {self.id} must price every medication kind exactly once")
        for kind, price in self.prices.items():
            if not math.isfinite(price) or price < 0:
                raise ValueError(f"facility {self.id}: price for {kind.value} must be >= 0")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def cheapest(self) -> tuple[MedicationKind, float]:
        # min() keeps the first of equal prices, i.e. the earlier kind
        return min(self.prices.items(), key=lambda kv: kv[1])


class IdAllocator:
    """Sequential facility IDs formatted as zero-padded decimals ("001")."""

    def __init__(self, width: int = 3, start: int = 1):
        if width < 1:
            raise ValueError("id width must be >= 1")
        self.width = width
        self._next = start

    @property
    def issued(self) -> int:
        return self._next - 1

    def next_id(self) -> str:
        n, self._next = self._next, self._next + 1
        return f"{n:0{self.width}d}"
