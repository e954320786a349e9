from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from cf_sim.domain.entities.geography import Bounds, Point
from cf_sim.domain.entities.medication import MedicationKind


# ------------- Placement --------------------
@runtime_checkable
class PointSampler(Protocol):
    """
    Responsibilities:
    • Draw `count` pairwise-distinct lattice points inside `bounds`.
    • Fail fast with GridCapacityError when that is impossible.
    """

    bounds: Bounds

    def sample(self, count: int) -> list[Point]: ...


# ------------- Pricing --------------------
@runtime_checkable
class PriceSampler(Protocol):
    """Draw one price per medication kind, each within [0, max_price]."""

    max_price: float

    def prices(self, kinds: Sequence[MedicationKind]) -> dict[MedicationKind, float]: ...
