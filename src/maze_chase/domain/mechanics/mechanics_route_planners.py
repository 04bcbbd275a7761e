# domain/mechanics/mechanics_route_planners.py
import math
from typing import Literal

from maze_chase.app.protocols import RoutePlanner
from maze_chase.domain.entities.geography import Pt, distance, to_point
from maze_chase.domain.errors import UnreachableTargetError
from maze_chase.domain.mechanics.mechanics_locator import HALF_PATH_WIDTH, Located, localize
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph

TieBreak = Literal["first", "lexicographic"]

Route = list[int]


def _shortcut(target_at: Located, chaser_at: Located) -> Route | None:
    # Same corridor, whichever end it was found from: just run at the target.
    if sorted(target_at) == sorted(chaser_at):
        return []
    if chaser_at[0] in target_at:
        return [chaser_at[0]]
    if chaser_at[1] in target_at:
        return [chaser_at[1]]
    return None


def _pick(completed: list[tuple[float, Route]], tie_break: TieBreak) -> Route:
    if not completed:
        raise UnreachableTargetError("no path from chaser to target")
    if any(math.isnan(cost) for cost, _ in completed):
        raise ValueError("route cost is NaN")
    best = min(cost for cost, _ in completed)
    ties = [route for cost, route in completed if cost == best]
    return min(ties) if tie_break == "lexicographic" else ties[0]


def find_shortest_path(
    target: Pt,
    chaser: Pt,
    maze: MazeGraph,
    *,
    half_path_width: float = HALF_PATH_WIDTH,
    tie_break: TieBreak = "first",
) -> Route:
    """
    Intersections the chaser should head for, nearest first, to reach the target.

    An empty list means chaser and target share a corridor and the chaser should
    head straight for the target.
    """
    target, chaser = to_point(target), to_point(chaser)
    target_at = localize(target, maze, half_path_width, who="target")
    chaser_at = localize(chaser, maze, half_path_width, who="chaser")

    short = _shortcut(target_at, chaser_at)
    if short is not None:
        return short

    a, b = chaser_at
    snapped = a == b
    frontier: list[tuple[float, Route]] = [(distance(maze.coordinates(a), chaser), [a])]
    if not snapped:
        frontier.append((distance(maze.coordinates(b), chaser), [b]))

    best_known: dict[int, float] = {}
    completed: list[tuple[float, Route]] = []
    while frontier:
        next_round: list[tuple[float, Route]] = []
        for cost, route in frontier:
            here = route[-1]
            known = best_known.get(here)
            # Beaten since this entry was queued.
            if known is not None and cost > known:
                continue
            best_known[here] = cost if known is None else min(known, cost)

            for _, edge in maze[here].paths():
                new_cost = cost + edge.length
                other = best_known.get(edge.end_index)
                if other is not None and other <= new_cost:
                    continue
                new_route = route + [edge.end_index]
                if edge.end_index in target_at:
                    reach = distance(maze.coordinates(edge.end_index), target)
                    completed.append((new_cost + reach, new_route))
                else:
                    next_round.append((new_cost, new_route))
        frontier = next_round

    shortest = _pick(completed, tie_break)
    # The chaser already stands on the first node; callers only want what is ahead.
    return shortest[1:] if snapped else shortest


class MazeRoutePlanner(RoutePlanner):
    def __init__(
        self,
        maze: MazeGraph,
        half_path_width: float = HALF_PATH_WIDTH,
        tie_break: TieBreak = "first",
    ):
        self.maze, self.half_path_width, self.tie_break = maze, half_path_width, tie_break

    def plan(self, target: Pt, chaser: Pt) -> Route:
        return find_shortest_path(
            target,
            chaser,
            self.maze,
            half_path_width=self.half_path_width,
            tie_break=self.tie_break,
        )


class DirectRoutePlanner(RoutePlanner):
    """Ignores the maze and always chases in a straight line."""

    def __init__(self, maze: MazeGraph | None = None):
        self.maze = maze

    def plan(self, target: Pt, chaser: Pt) -> Route:
        return []
