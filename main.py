# main.py
import argparse

from maze_chase.app.build import build
from maze_chase.io.config import load_scenario


def run(scenario: str, ticks: int, dt: float) -> int:
    app = build(load_scenario(scenario))
    return app.run(ticks=ticks, dt=dt)


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Run a maze chase scenario headless.")
    p.add_argument("scenario", help="path to a scenario JSON file")
    p.add_argument("--ticks", type=int, default=60)
    p.add_argument("--dt", type=float, default=1 / 60)
    args = p.parse_args()
    run(args.scenario, args.ticks, args.dt)
