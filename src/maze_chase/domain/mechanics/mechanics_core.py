# maze_chase/domain/mechanics/mechanics_core.py
from dataclasses import dataclass

from maze_chase.app.protocols import Mechanics, RoutePlanner, Steering
from maze_chase.domain.entities.geography import Point, Pt
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph


@dataclass
class Mechanics(Mechanics):
    maze: MazeGraph
    route_planner: RoutePlanner
    steering: Steering

    def route(self, target: Pt, chaser: Pt) -> list[int]:
        return self.route_planner.plan(target, chaser)

    def steer(self, route: list[int], target: Pt, chaser: Pt) -> Point:
        return self.steering.velocity(route, target, chaser, self.maze)

    def velocity(self, target: Pt, chaser: Pt) -> Point:
        return self.steer(self.route(target, chaser), target, chaser)

    def waypoints(self, route: list[int]) -> list[Point]:
        return [self.maze.coordinates(i) for i in route]
