# app/cli.py
import argparse
import logging
import sys

from cf_sim.app.build import build
from cf_sim.app.console import Session
from cf_sim.config.models import ScenarioModel
from cf_sim.io.config import load_scenario

log = logging.getLogger("cf_sim.cli")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="cf-sim",
        description="Find the closest central fill facilities on a random grid",
    )
    parser.add_argument("--config", default=None, help="JSON scenario file")
    parser.add_argument("--seed", type=int, default=None, help="master seed (default: random)")
    parser.add_argument("--show-map", action="store_true", help="print the node map at startup")
    parser.add_argument(
        "--no-catalog", action="store_true", help="do not list facilities and prices at startup"
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        model = load_scenario(args.config) if args.config else ScenarioModel()
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.log_level is not None:
            overrides["log"] = model.log.model_copy(update={"level": args.log_level})
        if overrides:
            model = model.model_copy(update=overrides)
        app = build(model)
    except (OSError, ValueError) as e:  # ValidationError and GridCapacityError included
        print(f"cf-sim: {e}", file=sys.stderr)
        return 2

    session = Session(
        app.grid,
        closest=model.query.closest,
        exit_word=model.query.exit_word,
        hooks=app.hooks,
    )
    answered = session.run(catalog=not args.no_catalog, node_map=args.show_map)
    log.info("session_end", extra={"extra": {"queries": answered, "seed": app.rng.master_seed}})
    return 0


if __name__ == "__main__":
    sys.exit(main())
