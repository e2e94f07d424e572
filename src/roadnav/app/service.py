# app/service.py
import time
from collections.abc import Sequence
from dataclasses import dataclass

from roadnav.app.hooks import NavHooks, NoopHooks
from roadnav.app.protocols import PathFinder
from roadnav.domain.builder import MapData
from roadnav.domain.entities.directions import DirectionStep
from roadnav.domain.entities.geography import Location
from roadnav.routing.directions import DirectionsGenerator


@dataclass(frozen=True)
class RoutePlan:
    path: list[int]
    total_miles: float
    steps: list[DirectionStep]

    def lines(self) -> list[str]:
        return [str(s) for s in self.steps]


class NavigationService:
    """
    Query surface over a finalized map. Holds no per-query state, so one
    instance can serve many threads at once.
    """

    def __init__(
        self,
        map_data: MapData,
        path_finder: PathFinder,
        directions: DirectionsGenerator | None = None,
        hooks: NavHooks | None = None,
    ):
        self.map = map_data
        self.path_finder = path_finder
        self.directions_gen = directions or DirectionsGenerator(map_data.graph)
        self.hooks = hooks or NoopHooks()

    def _timed(self, op: str, fn, *args, **kw):
        t0 = time.perf_counter()
        try:
            out = fn(*args)
        except Exception as exc:
            self.hooks.error(op, exc=exc, **kw)
            raise
        self.hooks.query(op, ms=(time.perf_counter() - t0) * 1000, **kw)
        return out

    def route(self, start_lon: float, start_lat: float, end_lon: float, end_lat: float) -> list[int]:
        return self._timed(
            "route",
            self.path_finder.route,
            start_lon,
            start_lat,
            end_lon,
            end_lat,
            start=(start_lon, start_lat),
            end=(end_lon, end_lat),
        )

    def directions(self, path: Sequence[int]) -> list[DirectionStep]:
        return self._timed("directions", self.directions_gen.directions, path, hops=len(path) - 1)

    def autocomplete(self, prefix: str) -> set[str]:
        return self._timed("autocomplete", self.map.prefixes.prefix_search, prefix, prefix=prefix)

    def locate(self, name: str) -> list[Location]:
        return self._timed("locate", self.map.names.locate, name, name=name)

    def plan(self, start_lon: float, start_lat: float, end_lon: float, end_lat: float) -> RoutePlan:
        path = self.route(start_lon, start_lat, end_lon, end_lat)
        return RoutePlan(
            path=path,
            total_miles=self.map.graph.path_length(path),
            steps=self.directions(path),
        )
