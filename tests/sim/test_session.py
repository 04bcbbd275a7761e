# tests/sim/test_session.py
import pytest

from maze_chase.domain.entities.actor import Actor
from maze_chase.domain.entities.geography import Point
from maze_chase.domain.errors import OffPathError
from maze_chase.domain.mechanics.mechanics_core import Mechanics
from maze_chase.domain.mechanics.mechanics_maze import build_maze
from maze_chase.domain.mechanics.mechanics_route_planners import MazeRoutePlanner
from maze_chase.domain.mechanics.mechanics_steering import ConstantSpeedSteering
from maze_chase.sim.hooks import NoopHooks
from maze_chase.sim.session import ChaseSession

SQUARE_WITH_CROSS = [
    ((1.0, 0.0), (-1.0, 0.0)),
    ((0.0, 1.0), (0.0, -1.0)),
    ((1.0, 1.0), (1.0, -1.0)),
    ((1.0, 1.0), (-1.0, 1.0)),
    ((-1.0, 1.0), (-1.0, -1.0)),
    ((-1.0, -1.0), (1.0, -1.0)),
]


# --- test hook that records what the session reports ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def step_start(self, *, tick, target, chasers):
        self.trace.append(("start", tick, chasers))

    def planned(self, chaser, *, tick, route, waypoints, velocity):
        self.trace.append(("planned", tick, chaser.id, waypoints))

    def step_end(self, *, tick, planned, ms):
        self.trace.append(("end", tick, planned))

    def error(self, chaser, *, tick, exc):
        self.trace.append(("error", tick, chaser.id, type(exc).__name__))


@pytest.fixture
def session_and_trace():
    maze = build_maze(SQUARE_WITH_CROSS)
    mech = Mechanics(
        maze=maze, route_planner=MazeRoutePlanner(maze), steering=ConstantSpeedSteering(2.5)
    )
    hooks = TraceHooks()
    return ChaseSession(mech, hooks=hooks), hooks


def test_step_sets_velocity_per_chaser(session_and_trace):
    session, hooks = session_and_trace
    target = Actor("player", Point(0.0, 0.0))
    g1 = Actor("g1", Point(-1.0, 0.5))
    g2 = Actor("g2", Point(0.0, 0.5))  # on a corridor ending at the player

    out = session.step(target, [g1, g2])

    assert set(out) == {"g1", "g2"}
    assert g1.velocity == out["g1"] == Point(0.0, -2.5)
    assert g2.velocity == out["g2"] == Point(0.0, -2.5)
    assert session.tick == 1
    assert hooks.trace == [
        ("start", 0, 2),
        ("planned", 0, "g1", [Point(-1.0, 0.0), Point(0.0, 0.0)]),
        ("planned", 0, "g2", [Point(0.0, 0.0)]),
        ("end", 0, 2),
    ]


def test_each_tick_replans_from_scratch(session_and_trace):
    session, _ = session_and_trace
    target = Actor("player", Point(0.0, 0.0))
    g = Actor("g", Point(-1.0, 0.5))
    first = session.step(target, [g])["g"]
    g.position = Point(-0.5, 0.0)  # moved onto the player's corridor
    second = session.step(target, [g])["g"]
    assert first == Point(0.0, -2.5)
    assert second == Point(2.5, 0.0)
    assert session.tick == 2


def test_off_path_chaser_is_reported_then_raised(session_and_trace):
    session, hooks = session_and_trace
    target = Actor("player", Point(0.0, 0.0))
    lost = Actor("lost", Point(5.0, 5.0))
    with pytest.raises(OffPathError):
        session.step(target, [lost])
    assert hooks.trace[-1] == ("error", 0, "lost", "OffPathError")


def test_actor_advance_integrates_velocity():
    a = Actor("a", Point(0.0, 0.0), velocity=Point(2.0, -1.0))
    a.advance(0.5)
    assert a.position == Point(1.0, -0.5)
