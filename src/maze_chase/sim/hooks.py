# sim/hooks.py
from typing import Protocol

from maze_chase.domain.entities.actor import Actor
from maze_chase.domain.entities.geography import Point


class SessionHooks(Protocol):
    def run_start(self, *, name: str, intersections: int, chasers: int): ...
    def run_end(self, *, ticks: int, **extra): ...
    def step_start(self, *, tick: int, target: Actor, chasers: int): ...
    def planned(
        self,
        chaser: Actor,
        *,
        tick: int,
        route: list[int],
        waypoints: list[Point],
        velocity: Point,
    ): ...
    def step_end(self, *, tick: int, planned: int, ms: float): ...
    def error(self, chaser: Actor, *, tick: int, exc: BaseException): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def step_start(self, **_):
        pass

    def planned(self, *_, **__):
        pass

    def step_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
