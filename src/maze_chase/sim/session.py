# sim/session.py

import time
from collections.abc import Iterable

from maze_chase.domain.entities.actor import Actor
from maze_chase.domain.entities.geography import Point
from maze_chase.domain.errors import OffPathError, UnreachableTargetError
from maze_chase.domain.mechanics.mechanics_core import Mechanics

from .hooks import NoopHooks, SessionHooks


class ChaseSession:
    """
    Drives the chasers once per simulation step.

    The host calls step() before it consumes velocities for that step. Every
    chaser is planned on its own from scratch; the maze is only read.
    """

    def __init__(self, mechanics: Mechanics, hooks: SessionHooks | None = None):
        self.mechanics = mechanics
        self._hooks = hooks or NoopHooks()
        self._tick = 0

    @property
    def tick(self) -> int:
        return self._tick

    def step(self, target: Actor, chasers: Iterable[Actor]) -> dict[str, Point]:
        chasers = list(chasers)
        t0 = time.perf_counter()
        self._hooks.step_start(tick=self._tick, target=target, chasers=len(chasers))
        out: dict[str, Point] = {}
        for chaser in chasers:
            try:
                route = self.mechanics.route(target.position, chaser.position)
            except (OffPathError, UnreachableTargetError) as exc:
                self._hooks.error(chaser, tick=self._tick, exc=exc)
                raise
            velocity = self.mechanics.steer(route, target.position, chaser.position)
            chaser.velocity = velocity
            out[chaser.id] = velocity
            self._hooks.planned(
                chaser,
                tick=self._tick,
                route=route,
                waypoints=self.mechanics.waypoints(route),
                velocity=velocity,
            )
        self._hooks.step_end(
            tick=self._tick, planned=len(out), ms=(time.perf_counter() - t0) * 1000
        )
        self._tick += 1
        return out
