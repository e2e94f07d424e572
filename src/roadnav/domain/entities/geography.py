from dataclasses import dataclass, field

UNKNOWN_ROAD = "unknown road"


# Core map types used by the graph and the name index
@dataclass(frozen=True)
class Location:
    """A named place as returned by exact-name lookup."""

    id: int
    lon: float
    lat: float
    name: str


@dataclass
class Node:
    id: int
    lon: float
    lat: float
    name: str | None = None
    way_name: str | None = None  # last way processed through this node
    edges: list[int] = field(default_factory=list)  # neighbour ids, insertion order
