# runtime/registries.py
from cf_sim.app.protocols import PointSampler, PriceSampler
from cf_sim.config.models import (
    PlacementExhaustiveModel,
    PlacementRejectionModel,
    PlacementUnion,
    PricingUniformModel,
    PricingUnion,
)
from cf_sim.domain.entities.geography import Bounds
from cf_sim.domain.placement import ExhaustivePointSampler, RejectionPointSampler
from cf_sim.domain.pricing import UniformPriceSampler


def make_point_sampler(cfg: PlacementUnion, *, bounds: Bounds, deps: dict) -> PointSampler:
    if isinstance(cfg, PlacementRejectionModel):
        return RejectionPointSampler(
            bounds=bounds, rng=deps["rng"], max_attempts_per_point=cfg.max_attempts_per_point
        )
    elif isinstance(cfg, PlacementExhaustiveModel):
        return ExhaustivePointSampler(bounds=bounds, rng=deps["rng"])
    else:
        raise TypeError(cfg)


def make_price_sampler(cfg: PricingUnion, *, deps: dict) -> PriceSampler:
    if isinstance(cfg, PricingUniformModel):
        return UniformPriceSampler(max_price=cfg.max_price, rng=deps["rng"])
    else:
        raise TypeError(cfg)
