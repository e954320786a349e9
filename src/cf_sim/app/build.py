# cf_sim/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from cf_sim.config.models import ScenarioModel
from cf_sim.domain.entities.facility import IdAllocator
from cf_sim.domain.entities.geography import Bounds
from cf_sim.domain.grid import Grid, populate
from cf_sim.domain.pricing import FacilityFactory
from cf_sim.io.grid_logging import GridLogging
from cf_sim.io.recorder import JsonlSink, Recorder
from cf_sim.runtime.registries import make_point_sampler, make_price_sampler
from cf_sim.sim.hooks import GridHooks, NoopHooks
from cf_sim.sim.rng import RNGRegistry


@dataclass
class App:
    config: ScenarioModel
    rng: RNGRegistry
    ids: IdAllocator
    grid: Grid
    hooks: GridHooks


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    hooks: GridHooks | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Hooks
    if hooks is None:
        if use_logging:
            recorder = Recorder(JsonlSink()) if model.log.record_events else None
            hooks = GridLogging(
                run_id=model.run_id,
                level=model.log.level,
                debug=model.log.debug,
                recorder=recorder,
            )
        else:
            hooks = NoopHooks()

    # 3) Samplers and factory
    g = model.grid
    bounds = Bounds(g.x_min, g.x_max, g.y_min, g.y_max)
    points = make_point_sampler(
        model.placement, bounds=bounds, deps={"rng": rng_registry.stream("placement")}
    )
    prices = make_price_sampler(model.pricing, deps={"rng": rng_registry.stream("prices")})
    ids = IdAllocator(width=g.id_width)
    factory = FacilityFactory(ids=ids, prices=prices)

    # 4) Grid
    grid = Grid(bounds, hooks=hooks)
    populate(grid, points.sample(g.facility_count), g.facilities_per_node, factory)
    hooks.grid_built(bounds=bounds, nodes=len(grid), seed=rng_registry.master_seed)

    return App(model, rng_registry, ids, grid, hooks)
