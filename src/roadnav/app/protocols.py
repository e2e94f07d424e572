from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable


# ------------- Map -------------------------------
@runtime_checkable
class IngestSink(Protocol):
    """
    Receives map events from a parser, in document order.
    Nodes must arrive before the ways that reference them; edges to ids
    never seen are dropped, never fatal.
    """

    def node(self, node_id: int, lon: float, lat: float, name: str | None = None) -> None: ...
    def way(self, node_ids: Sequence[int], way_name: str | None = None) -> None: ...


@runtime_checkable
class GraphView(Protocol):
    """
    Read-only view of a finalized road graph.
    Units: degrees for coordinates and bearings, miles for distances.
    """

    def __contains__(self, node_id) -> bool: ...
    def vertices(self) -> Iterable[int]: ...
    def adjacent(self, node_id: int) -> list[int]: ...
    def distance(self, u: int, v: int) -> float: ...
    def bearing(self, u: int, v: int) -> float: ...
    def nearest_node(self, lon: float, lat: float) -> int: ...
    def way_name(self, node_id: int) -> str: ...
    def edge_way_name(self, u: int, v: int) -> str: ...


# ------------- Routing ---------------------------
@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Shortest node path between two graph nodes.
      • Snap free coordinates to nodes and route between them.
    Raises NoRoute (or SearchAborted) instead of returning a partial path.
    """

    def shortest_path(self, start: int, goal: int) -> list[int]: ...
    def route(self, start_lon: float, start_lat: float, end_lon: float, end_lat: float) -> list[int]: ...
