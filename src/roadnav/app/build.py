# roadnav/app/build.py
import time
from collections.abc import Mapping
from dataclasses import dataclass

from roadnav.app.hooks import NavHooks, NoopHooks
from roadnav.app.protocols import PathFinder
from roadnav.app.service import NavigationService
from roadnav.config.models import MapByPath, NavigatorModel
from roadnav.domain.builder import MapData
from roadnav.io.nav_logging import NavLogging  # JSON logs
from roadnav.routing.directions import DirectionsGenerator
from roadnav.runtime.registries import make_path_finder, resolve_map


@dataclass
class App:
    map: MapData
    path_finder: PathFinder
    directions: DirectionsGenerator
    service: NavigationService
    hooks: NavHooks


def build(
    cfg: NavigatorModel | Mapping,
    *,
    maps: Mapping[str, MapData] | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        NavLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Map (graph + name index + prefix index)
    source = model.map.file if isinstance(model.map, MapByPath) else model.map.name
    hooks.build_start(source=source)
    t0 = time.perf_counter()
    map_data = resolve_map(model.map, deps={"maps": dict(maps or {})})
    hooks.build_end(
        nodes=map_data.nodes_seen,
        ways=map_data.ways_seen,
        routable=len(map_data.graph),
        names=len(map_data.names),
        wall_ms=(time.perf_counter() - t0) * 1000,
    )

    # 3) Routing components
    path_finder = make_path_finder(model.path_finder, deps={"graph": map_data.graph})
    directions = DirectionsGenerator(map_data.graph)

    # 4) Query surface
    service = NavigationService(map_data, path_finder, directions, hooks=hooks)
    return App(map_data, path_finder, directions, service, hooks)
