# domain/entities/geography.py
import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from maze_chase.domain.errors import MazeGeometryError


# Core geometry types used by mechanics
@dataclass(frozen=True, order=True)
class Point:
    x: float  # world x, projected from the host's 3D transform
    y: float  # world z in the host, "forward" is +y here


Pt = Point | tuple[float, float]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


def distance(a: Pt, b: Pt) -> float:
    a, b = to_point(a), to_point(b)
    return math.hypot(a.x - b.x, a.y - b.y)


class Direction(Enum):
    LEFT = "left"  # -x
    RIGHT = "right"  # +x
    FORWARD = "forward"  # +y
    BACKWARD = "backward"  # -y

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.FORWARD: Direction.BACKWARD,
    Direction.BACKWARD: Direction.FORWARD,
}

# Localization and search both walk the outgoing edges in this order.
SCAN_ORDER = (Direction.FORWARD, Direction.BACKWARD, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Corridor:
    """A straight, axis-aligned stretch of maze between two points.

    Endpoints may be given in either order; anything that is not purely
    horizontal or purely vertical is rejected.
    """

    start: Point
    end: Point

    def __post_init__(self):
        object.__setattr__(self, "start", to_point(self.start))
        object.__setattr__(self, "end", to_point(self.end))
        same_x = self.start.x == self.end.x
        same_y = self.start.y == self.end.y
        if same_x == same_y:
            raise MazeGeometryError(
                f"corridor {self.start} -> {self.end} must differ in exactly one axis"
            )

    @classmethod
    def of(cls, seg: "Corridor | tuple[Pt, Pt]") -> "Corridor":
        return seg if isinstance(seg, Corridor) else cls(seg[0], seg[1])

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    def normalized(self) -> "Corridor":
        """Same corridor with the smaller (x, then y) endpoint first."""
        if self.end < self.start:
            return Corridor(self.end, self.start)
        return self

    def contains(self, p: Point) -> bool:
        lo, hi = self.normalized().start, self.normalized().end
        if self.is_horizontal:
            return p.y == lo.y and lo.x <= p.x <= hi.x
        return p.x == lo.x and lo.y <= p.y <= hi.y

    @property
    def length(self) -> float:
        return distance(self.start, self.end)


@dataclass(frozen=True)
class Path:
    end_index: int
    length: float


@dataclass(frozen=True)
class Intersection:
    """A maze node. Corridors meet at right angles, so at most four ways out."""

    coordinates: Point
    left: Path | None = None
    right: Path | None = None
    forward: Path | None = None
    backward: Path | None = None

    def path(self, direction: Direction) -> Path | None:
        return getattr(self, direction.value)

    def paths(self) -> Iterator[tuple[Direction, Path]]:
        for d in SCAN_ORDER:
            p = self.path(d)
            if p is not None:
                yield d, p

    @property
    def degree(self) -> int:
        return sum(1 for _ in self.paths())
