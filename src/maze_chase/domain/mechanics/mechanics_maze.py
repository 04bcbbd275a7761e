# domain/mechanics/mechanics_maze.py
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from maze_chase.domain.entities.geography import (
    Corridor,
    Direction,
    Intersection,
    Path,
    Point,
    Pt,
    to_point,
)
from maze_chase.domain.errors import MazeGeometryError

log = logging.getLogger(__name__)

SegmentLike = Corridor | tuple[Pt, Pt]


@dataclass(frozen=True)
class MazeGraph:
    """
    Graph of corridor intersections, built once per level and read-only afterwards.

    Intersections live in a flat tuple and are referred to by index only; the
    index is stable for the graph's lifetime and is what routes are made of.
    """

    intersections: tuple[Intersection, ...]
    corridors: tuple[Corridor, ...] = ()

    @classmethod
    def from_segments(cls, segments: Iterable[SegmentLike]) -> "MazeGraph":
        return build_maze(segments)

    def __len__(self) -> int:
        return len(self.intersections)

    def __getitem__(self, i: int) -> Intersection:
        return self.intersections[i]

    def coordinates(self, i: int) -> Point:
        return self.intersections[i].coordinates

    def find(self, p: Pt) -> int | None:
        p = to_point(p)
        for i, node in enumerate(self.intersections):
            if node.coordinates == p:
                return i
        return None

    def neighbours(self, i: int) -> list[int]:
        return [path.end_index for _, path in self.intersections[i].paths()]

    def edges(self) -> Iterator[tuple[int, Direction, Path]]:
        for i, node in enumerate(self.intersections):
            for d, path in node.paths():
                yield i, d, path

    def phantom_indices(self) -> list[int]:
        """Nodes that lie on none of the corridors (crossings of extended lines)."""
        return [
            i
            for i, node in enumerate(self.intersections)
            if not any(c.contains(node.coordinates) for c in self.corridors)
        ]

    def is_connected(self) -> bool:
        # Phantom crossings carry no edges and never host an actor; leave them out.
        live = [i for i, node in enumerate(self.intersections) if node.degree]
        if not live:
            return True
        seen, stack = {live[0]}, [live[0]]
        while stack:
            for j in self.neighbours(stack.pop()):
                if j not in seen:
                    seen.add(j)
                    stack.append(j)
        return len(seen) == len(live)


def _check_unique(corridors: Sequence[Corridor]) -> None:
    seen: dict[Corridor, int] = {}
    for i, c in enumerate(corridors):
        key = c.normalized()
        if key in seen:
            raise MazeGeometryError(f"corridor {i} duplicates corridor {seen[key]}: {c}")
        seen[key] = i


def _discover_nodes(corridors: Sequence[Corridor]) -> list[Point]:
    order: list[Point] = []
    known: set[Point] = set()

    def add(p: Point) -> None:
        if p not in known:
            known.add(p)
            order.append(p)

    # Crossings first. The extended lines are crossed, not the drawn extents, so a
    # node may appear where no corridor actually runs.
    for i, a in enumerate(corridors):
        for b in corridors[i + 1 :]:
            if a.is_horizontal and b.is_vertical:
                add(Point(b.start.x, a.start.y))
            elif a.is_vertical and b.is_horizontal:
                add(Point(a.start.x, b.start.y))

    for c in corridors:
        n = c.normalized()
        add(n.start)
        add(n.end)
    return order


_AXIS = {
    True: (Direction.RIGHT, Direction.LEFT),  # horizontal
    False: (Direction.FORWARD, Direction.BACKWARD),  # vertical
}


def _assign_edges(
    corridors: Sequence[Corridor], nodes: Sequence[Point]
) -> list[dict[Direction, Path]]:
    slots: list[dict[Direction, Path]] = [{} for _ in nodes]
    for c in corridors:
        on = [i for i, p in enumerate(nodes) if c.contains(p)]
        # Sorting along the axis makes the walk independent of endpoint order.
        axis = (lambda i: nodes[i].x) if c.is_horizontal else (lambda i: nodes[i].y)
        on.sort(key=axis)
        up, down = _AXIS[c.is_horizontal]
        for lo, hi in zip(on, on[1:]):
            length = abs(axis(hi) - axis(lo))
            slots[lo][up] = Path(hi, length)
            slots[hi][down] = Path(lo, length)
    return slots


def build_maze(segments: Iterable[SegmentLike]) -> MazeGraph:
    corridors = tuple(Corridor.of(s) for s in segments)
    _check_unique(corridors)

    nodes = _discover_nodes(corridors)
    slots = _assign_edges(corridors, nodes)
    intersections = tuple(
        replace(Intersection(p), **{d.value: path for d, path in s.items()})
        for p, s in zip(nodes, slots)
    )
    maze = MazeGraph(intersections, corridors)

    if log.isEnabledFor(logging.DEBUG):
        phantoms = maze.phantom_indices()
        log.debug(
            "maze_built",
            extra={
                "extra": {
                    "corridors": len(corridors),
                    "intersections": len(maze),
                    "edges": sum(1 for _ in maze.edges()),
                    "phantoms": phantoms,
                }
            },
        )
    return maze
