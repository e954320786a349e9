# src/cf_sim/io/config.py
import json
import os

from cf_sim.config.models import ScenarioModel


def load_scenario(path: str) -> ScenarioModel:
    with open(os.path.expandvars(os.path.expanduser(path)), encoding="utf-8") as f:
        return ScenarioModel.model_validate(json.load(f))
