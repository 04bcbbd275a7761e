# runtime/registries.py
from collections.abc import Callable
from typing import Any

from maze_chase.app.protocols import RoutePlanner, Steering
from maze_chase.config.models import (
    ConstantSpeedSteeringModel,
    DirectRoutePlannerModel,
    MazeRoutePlannerModel,
    RoutePlannerUnion,
    SteeringUnion,
)
from maze_chase.domain.mechanics.mechanics_route_planners import (
    DirectRoutePlanner,
    MazeRoutePlanner,
)
from maze_chase.domain.mechanics.mechanics_steering import ConstantSpeedSteering

RoutePlannerFactory = Callable[[RoutePlannerUnion, dict[str, Any]], RoutePlanner]
SteeringFactory = Callable[[SteeringUnion, dict[str, Any]], Steering]

_route_planner_registry: dict[str, RoutePlannerFactory] = {}
_steering_registry: dict[str, SteeringFactory] = {}


# ------------------- Route planner registries ---------------------------


def register_route_planner(kind: str):
    def deco(fn: RoutePlannerFactory):
        _route_planner_registry[kind] = fn
        return fn

    return deco


def make_route_planner(cfg: RoutePlannerUnion, *, maze, half_path_width: float) -> RoutePlanner:
    try:
        factory = _route_planner_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown route planner kind {cfg.kind!r}") from None
    return factory(cfg, {"maze": maze, "half_path_width": half_path_width})


@register_route_planner("maze")
def _make_maze(cfg: MazeRoutePlannerModel, deps):
    return MazeRoutePlanner(deps["maze"], deps["half_path_width"], cfg.tie_break)


@register_route_planner("direct")
def _make_direct(cfg: DirectRoutePlannerModel, deps):
    return DirectRoutePlanner(deps["maze"])


# ------------------- Steering registries ---------------------------


def register_steering(kind: str):
    def deco(fn: SteeringFactory):
        _steering_registry[kind] = fn
        return fn

    return deco


def make_steering(cfg: SteeringUnion) -> Steering:
    try:
        factory = _steering_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown steering kind {cfg.kind!r}") from None
    return factory(cfg, {})


@register_steering("constant")
def _make_constant(cfg: ConstantSpeedSteeringModel, deps):
    return ConstantSpeedSteering(cfg.speed)
