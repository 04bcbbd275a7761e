import numpy as np
import pytest

from maze_chase.domain.entities.geography import Corridor, Direction, Point
from maze_chase.domain.errors import MazeGeometryError
from maze_chase.domain.mechanics.mechanics_maze import MazeGraph, build_maze

CROSS = [((1.0, 0.0), (-1.0, 0.0)), ((0.0, 1.0), (0.0, -1.0))]


def grid(n: int = 4, step: float = 4.0):
    """n horizontal and n vertical corridors spanning a square."""
    hi = (n - 1) * step
    rows = [((0.0, k * step), (hi, k * step)) for k in range(n)]
    cols = [((k * step, 0.0), (k * step, hi)) for k in range(n)]
    return rows + cols


# ---------- Node discovery


def test_crossings_come_before_endpoints_and_endpoints_are_normalized():
    maze = build_maze(CROSS)
    coords = [n.coordinates for n in maze.intersections]
    assert coords == [
        Point(0.0, 0.0),
        Point(-1.0, 0.0),
        Point(1.0, 0.0),
        Point(0.0, -1.0),
        Point(0.0, 1.0),
    ]


def test_coordinates_are_unique():
    maze = build_maze(grid())
    coords = [n.coordinates for n in maze.intersections]
    assert len(coords) == len(set(coords)) == 16


def test_cross_edges_use_cardinal_slots():
    maze = build_maze(CROSS)
    centre = maze[0]
    assert centre.left.end_index == 1 and centre.left.length == 1.0
    assert centre.right.end_index == 2
    assert centre.backward.end_index == 3
    assert centre.forward.end_index == 4
    assert maze[1].right.end_index == 0 and maze[1].left is None
    assert maze[4].backward.end_index == 0 and maze[4].forward is None


def test_corridor_split_by_every_node_on_it():
    maze = build_maze(grid(n=3, step=2.0))
    a, b, c = maze.find((0.0, 0.0)), maze.find((2.0, 0.0)), maze.find((4.0, 0.0))
    assert maze[a].right.end_index == b
    assert maze[b].right.end_index == c
    assert maze[c].left.end_index == b
    assert maze[a].right.length == pytest.approx(2.0)


# ---------- Graph properties


def test_order_independence_under_random_reversals():
    segs = grid()
    base = build_maze(segs)
    rng = np.random.default_rng(7)
    for _ in range(20):
        flip = rng.random(len(segs)) < 0.5
        mixed = [(b, a) if f else (a, b) for (a, b), f in zip(segs, flip)]
        assert build_maze(mixed).intersections == base.intersections


def test_every_edge_has_a_reciprocal_of_equal_length():
    maze = build_maze(grid())
    for src, d, path in maze.edges():
        back = maze[path.end_index].path(d.opposite)
        assert back is not None
        assert back.end_index == src
        assert back.length == path.length


def test_edge_lengths_are_positive():
    maze = build_maze(grid())
    assert all(path.length > 0 for _, _, path in maze.edges())


def test_from_segments_matches_build_maze():
    assert MazeGraph.from_segments(CROSS) == build_maze(CROSS)


def test_neighbours_follow_scan_order():
    maze = build_maze(CROSS)
    # forward, backward, left, right
    assert maze.neighbours(0) == [4, 3, 1, 2]


# ---------- Contract failures


@pytest.mark.parametrize(
    "seg",
    [
        ((0.0, 0.0), (1.0, 1.0)),  # diagonal
        ((2.0, 2.0), (2.0, 2.0)),  # zero length
    ],
)
def test_non_axis_aligned_corridor_is_rejected(seg):
    with pytest.raises(MazeGeometryError):
        build_maze([*CROSS, seg])


def test_duplicate_corridor_is_rejected_in_either_order():
    with pytest.raises(MazeGeometryError):
        build_maze([*CROSS, CROSS[0]])
    with pytest.raises(MazeGeometryError):
        build_maze([*CROSS, (CROSS[1][1], CROSS[1][0])])


# ---------- Crossings of extended lines


def test_crossing_outside_both_corridors_is_kept_as_isolated_node():
    maze = build_maze([((0.0, 0.0), (2.0, 0.0)), ((5.0, 1.0), (5.0, 3.0))])
    assert maze.coordinates(0) == Point(5.0, 0.0)
    assert maze.phantom_indices() == [0]
    assert maze[0].degree == 0
    # isolated crossings don't count against connectivity, but the two corridors do
    assert not maze.is_connected()


def test_crossing_on_one_corridor_splits_it():
    maze = build_maze([((0.0, 0.0), (6.0, 0.0)), ((5.0, 1.0), (5.0, 3.0))])
    n5 = maze.find((5.0, 0.0))
    assert maze.phantom_indices() == []
    assert maze[n5].left.length == 5.0 and maze[n5].right.length == 1.0
    assert maze[n5].forward is None


def test_grid_is_connected():
    assert build_maze(grid()).is_connected()


def test_corridor_helpers():
    c = Corridor((3.0, 1.0), (-1.0, 1.0))
    assert c.is_horizontal and not c.is_vertical
    assert c.normalized().start == Point(-1.0, 1.0)
    assert c.contains(Point(0.0, 1.0))
    assert not c.contains(Point(4.0, 1.0))
    assert c.length == 4.0
    assert Direction.FORWARD.opposite is Direction.BACKWARD
