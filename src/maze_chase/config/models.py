from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

Coord = tuple[float, float]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


# ----------------- MAZE ---------------------


class MazeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    corridors: list[tuple[Coord, Coord]]
    half_path_width: float = 0.5
    require_connected: bool = False

    @field_validator("corridors")
    @classmethod
    def _axis_aligned(cls, v: list[tuple[Coord, Coord]]) -> list[tuple[Coord, Coord]]:
        for i, (a, b) in enumerate(v):
            if (a[0] == b[0]) == (a[1] == b[1]):
                raise ValueError(f"corridor {i} {a}->{b} must be horizontal or vertical")
        return v

    @field_validator("half_path_width")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ----------------- ROUTE PLANNERS ---------------------


class MazeRoutePlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["maze"] = "maze"
    tie_break: Literal["first", "lexicographic"] = "first"


class DirectRoutePlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["direct"] = "direct"


RoutePlannerUnion = Annotated[
    MazeRoutePlannerModel | DirectRoutePlannerModel,
    Field(discriminator="kind"),
]

# ----------------- STEERING ---------------------


class ConstantSpeedSteeringModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["constant"] = "constant"
    speed: float = 2.5

    @field_validator("speed")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


SteeringUnion = Annotated[ConstantSpeedSteeringModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    route_planner: RoutePlannerUnion = Field(default_factory=MazeRoutePlannerModel)
    steering: SteeringUnion = Field(default_factory=ConstantSpeedSteeringModel)


class ActorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    position: Coord


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    maze: MazeModel
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
    target: ActorModel
    chasers: list[ActorModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self):
        ids = [self.target.id, *(c.id for c in self.chasers)]
        if len(set(ids)) != len(ids):
            raise ValueError(f"actor ids must be unique, got {ids}")
        return self
