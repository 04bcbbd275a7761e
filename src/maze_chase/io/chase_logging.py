# io/chase_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from maze_chase.sim.hooks import NoopHooks


def _jsonable(v):
    if is_dataclass(v):
        return asdict(v)
    if isinstance(v, (list, tuple)):
        return [_jsonable(x) for x in v]
    return v


def _default_json_logger(name="maze_chase", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=_jsonable)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class ChaseLogging(NoopHooks):
    """
    Structured logs for the per-tick chase loop.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self, tick: int) -> bool:
        return self.debug and tick % self.sample_every == 0

    # --------------------------------------------------------

    def step_start(self, *, tick: int, target, chasers: int):
        if self._sampled(tick):
            self._emit("DEBUG", "step_start", tick=tick, target=target.position, chasers=chasers)

    def planned(self, chaser, *, tick: int, route, waypoints, velocity):
        if self._sampled(tick):
            self._emit(
                "DEBUG",
                "planned",
                tick=tick,
                chaser=chaser.id,
                position=_jsonable(chaser.position),
                route=route,
                waypoints=_jsonable(waypoints),
                velocity=_jsonable(velocity),
            )

    def step_end(self, *, tick: int, planned: int, ms: float):
        if self._sampled(tick):
            self._emit("DEBUG", "step_end", tick=tick, planned=planned, ms=ms)

    def error(self, chaser, *, tick: int, exc: BaseException):
        self._emit(
            "ERROR",
            "chase_error",
            tick=tick,
            chaser=chaser.id,
            position=_jsonable(chaser.position),
            error=str(exc),
            error_type=type(exc).__name__,
        )

    # ------------- Run lifecycle --------------------------

    def run_start(self, *, name: str, intersections: int, chasers: int):
        self._emit("INFO", "run_start", name=name, intersections=intersections, chasers=chasers)

    def run_end(self, *, ticks: int, **extra):
        self._emit("INFO", "run_end", ticks=ticks, **extra)
