# domain/mechanics/mechanics_steering.py
import numpy as np

from maze_chase.app.protocols import Steering
from maze_chase.domain.entities.geography import Point, Pt, to_point
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph

# Ghost speed, world units per second.
DEFAULT_SPEED = 2.5


def heading(a: Pt, b: Pt) -> np.ndarray:
    """Unit vector from a to b; zero when the points coincide."""
    a, b = to_point(a), to_point(b)
    v = np.array([b.x - a.x, b.y - a.y], dtype=float)
    n = np.linalg.norm(v)
    return v / n if n > 0 else np.zeros(2)


class ConstantSpeedSteering(Steering):
    def __init__(self, speed: float = DEFAULT_SPEED):
        self.speed = speed

    def velocity(self, route: list[int], target: Pt, chaser: Pt, maze: MazeGraph) -> Point:
        aim = maze.coordinates(route[0]) if route else target
        v = heading(chaser, aim) * self.speed
        return Point(float(v[0]), float(v[1]))
