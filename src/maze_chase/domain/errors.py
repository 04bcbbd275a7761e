# domain/errors.py


class MazeGeometryError(ValueError):
    """Corridor input the maze graph cannot be built from."""


class OffPathError(RuntimeError):
    def __init__(self, point, who: str = "position"):
        super().__init__(f"{who} not on a path: {point}")
        self.point = point
        self.who = who


class UnreachableTargetError(RuntimeError):
    """The chaser's and target's corridors lie in different maze components."""
