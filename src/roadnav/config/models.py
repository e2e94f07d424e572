import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from roadnav.io.osm import ALLOWED_HIGHWAY_TYPES


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- MAP SOURCES ---------------------


class MapByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["osm"] = "osm"
    must_exist: bool = True
    highway_types: frozenset[str] = ALLOWED_HIGHWAY_TYPES

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class MapByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: str


MapRef = Annotated[MapByPath | MapByName, Field(discriminator="by")]


# ----------------- PATH FINDERS ---------------------


class _PathFinderBase(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_expansions: int | None = None  # None => unbounded

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is not None and v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


class PathFinderAStarModel(_PathFinderBase):
    kind: Literal["astar"] = "astar"


class PathFinderDijkstraModel(_PathFinderBase):
    kind: Literal["dijkstra"] = "dijkstra"


PathFinderUnion = Annotated[
    PathFinderAStarModel | PathFinderDijkstraModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    map: MapRef
    path_finder: PathFinderUnion = Field(default_factory=PathFinderAStarModel)
