# src/maze_chase/io/config.py
import json
import os

from maze_chase.config.models import ScenarioModel


def load_scenario(file: str) -> ScenarioModel:
    path = os.path.expandvars(os.path.expanduser(file))
    with open(path, encoding="utf-8") as f:
        return ScenarioModel.model_validate(json.load(f))
