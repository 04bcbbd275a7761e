# maze_chase/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from maze_chase.config.models import ActorModel, ScenarioModel
from maze_chase.domain.entities.actor import Actor
from maze_chase.domain.entities.geography import to_point
from maze_chase.domain.mechanics.mechanics_core import Mechanics
from maze_chase.domain.mechanics.mechanics_factory import build_maze_from_model, build_mechanics
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph
from maze_chase.io.chase_logging import ChaseLogging  # JSON logs
from maze_chase.sim.hooks import NoopHooks, SessionHooks
from maze_chase.sim.session import ChaseSession


@dataclass
class App:
    name: str
    session: ChaseSession
    mechanics: Mechanics
    maze: MazeGraph
    target: Actor
    chasers: list[Actor]
    hooks: SessionHooks

    def run(self, ticks: int, dt: float) -> int:
        """Demo loop: plan, then move every chaser with its new velocity."""
        self.hooks.run_start(
            name=self.name, intersections=len(self.maze), chasers=len(self.chasers)
        )
        for _ in range(ticks):
            self.session.step(self.target, self.chasers)
            for c in self.chasers:
                c.advance(dt)
        self.hooks.run_end(ticks=self.session.tick)
        return self.session.tick


def _actor(m: ActorModel) -> Actor:
    return Actor(id=m.id, position=to_point(m.position))


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        ChaseLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Maze & mechanics
    maze = build_maze_from_model(model.maze)
    mechanics = build_mechanics(
        model.mechanics, maze, half_path_width=model.maze.half_path_width
    )

    # 3) Actors & session
    target = _actor(model.target)
    chasers = [_actor(c) for c in model.chasers]
    session = ChaseSession(mechanics, hooks=hooks)

    return App(model.name, session, mechanics, maze, target, chasers, hooks)
