# domain/entities/actor.py
from dataclasses import dataclass, field

from maze_chase.domain.entities.geography import Point


@dataclass
class Actor:
    """Position record the host engine keeps in sync with its entity each tick."""

    id: str
    position: Point
    velocity: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def advance(self, dt: float) -> None:
        self.position = Point(
            self.position.x + self.velocity.x * dt,
            self.position.y + self.velocity.y * dt,
        )
