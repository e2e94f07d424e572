# runtime/registries.py
import os
from collections.abc import Callable

from roadnav.app.protocols import PathFinder
from roadnav.config.models import (
    MapByName,
    MapByPath,
    MapRef,
    PathFinderAStarModel,
    PathFinderDijkstraModel,
    PathFinderUnion,
)
from roadnav.domain.builder import MapBuilder, MapData
from roadnav.routing.pathfinder import AStarPathFinder, DijkstraPathFinder
from roadnav.runtime.resources import load_map_from_path

PathFinderFactory = Callable[[PathFinderUnion, dict], PathFinder]

_path_finder_registry: dict[str, PathFinderFactory] = {}


# ----- Map sources --------------------------


def resolve_map(ref: MapRef, *, deps: dict) -> MapData:
    """
    deps can include:
      - 'maps': dict[str, MapData]  # prebuilt maps by name
    """
    if isinstance(ref, MapByName):
        return deps["maps"][ref.name]  # raises KeyError if missing
    if isinstance(ref, MapByPath):
        if not os.path.exists(ref.file):
            if ref.must_exist:
                raise FileNotFoundError(ref.file)
            return MapBuilder().finish()
        return load_map_from_path(ref.file, ref.fmt, ref.highway_types)
    raise TypeError(ref)


# --------------------- Path finders  ---------------------


def register_path_finder(kind: str):
    def deco(fn: PathFinderFactory):
        _path_finder_registry[kind] = fn
        return fn

    return deco


def make_path_finder(cfg: PathFinderUnion, *, deps: dict) -> PathFinder:
    try:
        factory = _path_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown path finder kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_path_finder("astar")
def _make_astar(cfg: PathFinderAStarModel, deps):
    return AStarPathFinder(deps["graph"], max_expansions=cfg.max_expansions)


@register_path_finder("dijkstra")
def _make_dijkstra(cfg: PathFinderDijkstraModel, deps):
    return DijkstraPathFinder(deps["graph"], max_expansions=cfg.max_expansions)
