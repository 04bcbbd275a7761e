from typing import Protocol, runtime_checkable

from maze_chase.domain.entities.geography import Point, Pt


# ------------- Mechanics --------------------
@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Locate target and chaser on the maze.
      • Return the intersection indices the chaser should walk, nearest first.
    Stateless: called afresh every tick, never caches a route.
    """

    def plan(self, target: Pt, chaser: Pt) -> list[int]: ...


@runtime_checkable
class Steering(Protocol):
    """
    Turn a planned route into the chaser's velocity for this tick.
    An empty route means "head straight for the target".
    """

    def velocity(self, route: list[int], target: Pt, chaser: Pt, maze) -> Point: ...


@runtime_checkable
class Mechanics(Protocol):
    """
    Convenience façade bundling the maze with the planning components.
    Provides common helpers so call sites don’t need to juggle pieces.
    """

    route_planner: RoutePlanner
    steering: Steering

    def route(self, target: Pt, chaser: Pt) -> list[int]:
        return self.route_planner.plan(target, chaser)

    def velocity(self, target: Pt, chaser: Pt) -> Point: ...
