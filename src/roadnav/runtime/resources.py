# roadnav/runtime/resources.py
from functools import lru_cache

from roadnav.domain.builder import MapBuilder, MapData
from roadnav.io.osm import load_osm


@lru_cache(maxsize=8)
def load_map_from_path(file: str, fmt: str, highway_types: frozenset[str]) -> MapData:
    builder = MapBuilder()
    if fmt == "osm":
        with open(file, "rb") as f:
            load_osm(f, builder, highway_types)
        return builder.finish()
    raise ValueError(f"Unsupported map fmt {fmt!r}")
