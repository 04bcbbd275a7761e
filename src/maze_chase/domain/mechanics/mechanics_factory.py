# maze_chase/domain/mechanics/mechanics_factory.py

from maze_chase.config.models import MazeModel, MechanicsModel
from maze_chase.domain.errors import MazeGeometryError
from maze_chase.domain.mechanics.mechanics_core import Mechanics
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph, build_maze
from maze_chase.runtime.registries import make_route_planner, make_steering


def build_maze_from_model(cfg: MazeModel) -> MazeGraph:
    maze = build_maze(cfg.corridors)
    if cfg.require_connected and not maze.is_connected():
        raise MazeGeometryError("maze has corridors unreachable from one another")
    return maze


def build_mechanics(cfg: MechanicsModel, maze: MazeGraph, *, half_path_width: float) -> Mechanics:
    route_planner = make_route_planner(
        cfg.route_planner, maze=maze, half_path_width=half_path_width
    )
    steering = make_steering(cfg.steering)

    return Mechanics(maze=maze, route_planner=route_planner, steering=steering)
