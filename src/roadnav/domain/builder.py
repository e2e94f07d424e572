# domain/builder.py
from collections.abc import Sequence
from dataclasses import dataclass

from roadnav.domain.entities.geography import Location
from roadnav.domain.graph import RoadGraph
from roadnav.domain.names import NameIndex
from roadnav.domain.trie import PrefixIndex


@dataclass(frozen=True)
class MapData:
    graph: RoadGraph
    names: NameIndex
    prefixes: PrefixIndex
    nodes_seen: int = 0
    ways_seen: int = 0


class MapBuilder:
    """
    Ingestion sink: receives node/way events in document order and feeds the
    graph, the exact-name index and the prefix index. finish() is one-shot.
    """

    def __init__(self):
        self.graph = RoadGraph()
        self.names = NameIndex()
        self.prefixes = PrefixIndex()
        self.nodes_seen = 0
        self.ways_seen = 0
        self._done = False

    def node(self, node_id: int, lon: float, lat: float, name: str | None = None) -> None:
        self.graph.add_node(node_id, lon, lat, name)
        self.nodes_seen += 1
        if name:
            if self.names.add(Location(node_id, float(lon), float(lat), name)):
                self.prefixes.insert(name)

    def way(self, node_ids: Sequence[int], way_name: str | None = None) -> None:
        self.ways_seen += 1
        if node_ids:
            self.graph.add_way(node_ids, way_name)

    def finish(self) -> MapData:
        if self._done:
            raise RuntimeError("MapBuilder.finish() already called")
        self.graph.finalize()
        self._done = True
        return MapData(self.graph, self.names, self.prefixes, self.nodes_seen, self.ways_seen)
