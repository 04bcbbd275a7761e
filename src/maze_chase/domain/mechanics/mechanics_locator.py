# domain/mechanics/mechanics_locator.py
from maze_chase.domain.entities.geography import Direction, Pt, to_point
from maze_chase.domain.errors import OffPathError
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph

# Half the corridor width; also the chaser's radius in the host scene.
HALF_PATH_WIDTH = 0.5

Located = tuple[int, int]


def find_path(
    p: Pt, maze: MazeGraph, half_path_width: float = HALF_PATH_WIDTH
) -> Located | None:
    """
    Indices of the two intersections the position lies between, or (i, i) when it
    stands on intersection i. Positions slightly off a corridor (within the half
    width) round onto it. None if no corridor matches.
    """
    p = to_point(p)

    def within(a: float, b: float) -> bool:
        return abs(a - b) < half_path_width

    # Standing on a node wins over lying along one of its edges.
    for i, node in enumerate(maze.intersections):
        c = node.coordinates
        if within(c.x, p.x) and within(c.y, p.y):
            return (i, i)

    for i, node in enumerate(maze.intersections):
        c = node.coordinates
        # not elif: a position can miss the vertical test and still match here
        if within(c.x, p.x):
            if c.y < p.y:
                hit = _along(node.path(Direction.FORWARD), p.y - c.y)
            elif c.y > p.y:
                hit = _along(node.path(Direction.BACKWARD), c.y - p.y)
            else:
                hit = None
            if hit is not None:
                return (i, hit)
        if within(c.y, p.y):
            if c.x < p.x:
                hit = _along(node.path(Direction.RIGHT), p.x - c.x)
            elif c.x > p.x:
                hit = _along(node.path(Direction.LEFT), c.x - p.x)
            else:
                hit = None
            if hit is not None:
                return (i, hit)
    return None


def _along(path, dist: float) -> int | None:
    if path is not None and dist < path.length:
        return path.end_index
    return None


def localize(
    p: Pt, maze: MazeGraph, half_path_width: float = HALF_PATH_WIDTH, *, who: str = "position"
) -> Located:
    found = find_path(p, maze, half_path_width)
    if found is None:
        raise OffPathError(to_point(p), who=who)
    return found
