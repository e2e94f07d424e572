# domain/graph.py
import logging
from collections.abc import Iterable, Sequence

import numpy as np

from roadnav.domain.entities.geography import UNKNOWN_ROAD, Node
from roadnav.domain.errors import EmptyGraph, UnknownVertex
from roadnav.domain.geodesy import haversine_miles, haversine_miles_many, initial_bearing

log = logging.getLogger(__name__)


class RoadGraph:
    """
    Road network: nodes keyed by integer id, symmetric adjacency, way names.

    Built once through add_node/add_way, then finalize() prunes isolated
    nodes and freezes the graph. Read-only queries are safe from many threads
    after that.
    """

    def __init__(self):
        self._nodes: dict[int, Node] = {}
        self._edge_names: dict[tuple[int, int], str] = {}
        self._finalized = False
        self._ids: np.ndarray | None = None
        self._lons: np.ndarray | None = None
        self._lats: np.ndarray | None = None
        self.skipped_edges = 0

    # ------------------ construction ------------------------

    def _check_mutable(self):
        if self._finalized:
            raise RuntimeError("graph is finalized; no further updates")

    def add_node(self, node_id: int, lon: float, lat: float, name: str | None = None) -> None:
        self._check_mutable()
        self._nodes[node_id] = Node(node_id, float(lon), float(lat), name)

    def add_way(self, node_ids: Sequence[int], way_name: str | None) -> int:
        """Connect consecutive ids in both directions; returns number of edges added."""
        self._check_mutable()
        name = way_name or UNKNOWN_ROAD
        node_ids = list(node_ids)
        added = 0
        for u, v in zip(node_ids, node_ids[1:]):
            nu, nv = self._nodes.get(u), self._nodes.get(v)
            if nu is None or nv is None:
                self.skipped_edges += 1
                log.debug("skip edge %s-%s on %r: unknown endpoint", u, v, name)
                continue
            nu.edges.append(v)
            nv.edges.append(u)
            nu.way_name = nv.way_name = name
            self._edge_names[(u, v)] = self._edge_names[(v, u)] = name
            added += 1
        return added

    def finalize(self) -> int:
        """Drop nodes without neighbours and freeze. Returns the number pruned."""
        self._check_mutable()
        isolated = [nid for nid, n in self._nodes.items() if not n.edges]
        for nid in isolated:
            del self._nodes[nid]
        self._ids, self._lons, self._lats = self._coord_table()
        self._finalized = True
        return len(isolated)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _coord_table(self):
        ids = np.fromiter(sorted(self._nodes), dtype=np.int64, count=len(self._nodes))
        lons = np.array([self._nodes[int(i)].lon for i in ids], dtype=float)
        lats = np.array([self._nodes[int(i)].lat for i in ids], dtype=float)
        return ids, lons, lats

    # ------------------ lookups -----------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def _node(self, node_id: int) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownVertex(node_id) from None

    def vertices(self) -> Iterable[int]:
        return self._nodes.keys()

    def lon(self, node_id: int) -> float:
        return self._node(node_id).lon

    def lat(self, node_id: int) -> float:
        return self._node(node_id).lat

    def name(self, node_id: int) -> str | None:
        return self._node(node_id).name

    def adjacent(self, node_id: int) -> list[int]:
        return list(self._node(node_id).edges)

    def way_name(self, node_id: int) -> str:
        return self._node(node_id).way_name or UNKNOWN_ROAD

    def edge_way_name(self, u: int, v: int) -> str:
        name = self._edge_names.get((u, v))
        return name if name is not None else self.way_name(v)

    # ------------------ geometry ----------------------------

    def distance(self, u: int, v: int) -> float:
        a, b = self._node(u), self._node(v)
        return haversine_miles(a.lon, a.lat, b.lon, b.lat)

    def bearing(self, u: int, v: int) -> float:
        a, b = self._node(u), self._node(v)
        return initial_bearing(a.lon, a.lat, b.lon, b.lat)

    def path_length(self, path: Sequence[int]) -> float:
        return sum((self.distance(u, v) for u, v in zip(path, path[1:])), 0.0)

    def nearest_node(self, lon: float, lat: float) -> int:
        """Closest node by great-circle distance; ties go to the lowest id."""
        if not self._nodes:
            raise EmptyGraph()
        if self._finalized:
            ids, lons, lats = self._ids, self._lons, self._lats
        else:
            ids, lons, lats = self._coord_table()
        d = haversine_miles_many(lon, lat, lons, lats)
        return int(ids[int(np.argmin(d))])
