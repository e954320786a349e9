# domain/pricing.py
from collections.abc import Sequence

from cf_sim.app.protocols import PriceSampler
from cf_sim.domain.entities.facility import Facility, IdAllocator
from cf_sim.domain.entities.medication import MedicationKind

MAX_PRICE = 200.0  # USD


class UniformPriceSampler(PriceSampler):
    def __init__(self, *, max_price: float = MAX_PRICE, rng):
        if max_price < 0:
            raise ValueError("max_price must be >= 0")
        self.max_price, self.rng = max_price, rng

    def prices(self, kinds: Sequence[MedicationKind]) -> dict[MedicationKind, float]:
        # u in [0, 1); rounding up to 2 dp may overshoot a max_price with more decimals
        return {
            k: min(round(float(self.rng.random()) * self.max_price, 2), self.max_price)
            for k in kinds
        }


class FacilityFactory:
    """Creates facilities with the next allocated ID and a freshly drawn price list."""

    def __init__(self, *, ids: IdAllocator, prices: PriceSampler):
        self.ids, self.price_sampler = ids, prices

    def create(self) -> Facility:
        fid = self.ids.next_id()
        prices = self.price_sampler.prices(tuple(MedicationKind))
        cap = self.price_sampler.max_price
        if any(p > cap for p in prices.values()):
            raise ValueError(f"facility {fid}: price above max_price {cap}")
        return Facility(id=fid, prices=prices)
