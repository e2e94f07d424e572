# routing/pathfinder.py
import heapq
import itertools
from dataclasses import dataclass, field

from roadnav.app.protocols import GraphView, PathFinder
from roadnav.domain.errors import NoRoute, SearchAborted, UnknownVertex


@dataclass
class SearchContext:
    """All mutable state of one search. Built fresh per call, never shared."""

    start: int
    goal: int
    frontier: list[tuple[float, int, int]] = field(default_factory=list)
    best: dict[int, float] = field(default_factory=dict)
    parent: dict[int, int] = field(default_factory=dict)
    done: set[int] = field(default_factory=set)
    expanded: int = 0
    _seq: itertools.count = field(default_factory=itertools.count)

    def push(self, node: int, priority: float) -> None:
        heapq.heappush(self.frontier, (priority, next(self._seq), node))

    def pop(self) -> int:
        return heapq.heappop(self.frontier)[2]

    def path(self) -> list[int]:
        out = [self.goal]
        while out[-1] != self.start:
            out.append(self.parent[out[-1]])
        out.reverse()
        return out


class AStarPathFinder(PathFinder):
    """
    A* over great-circle distance. Terminates when the goal is popped, so the
    result is optimal for any consistent heuristic.
    """

    def __init__(self, graph: GraphView, max_expansions: int | None = None):
        self.G, self.max_expansions = graph, max_expansions

    def _h(self, u: int, goal: int) -> float:
        return self.G.distance(u, goal)

    def route(self, start_lon, start_lat, end_lon, end_lat) -> list[int]:
        na = self.G.nearest_node(start_lon, start_lat)
        nb = self.G.nearest_node(end_lon, end_lat)
        return self.shortest_path(na, nb)

    def shortest_path(self, start: int, goal: int) -> list[int]:
        for n in (start, goal):
            if n not in self.G:
                raise UnknownVertex(n)
        if start == goal:
            return [start]

        ctx = SearchContext(start, goal)
        ctx.best[start] = 0.0
        ctx.push(start, self._h(start, goal))

        while ctx.frontier:
            u = ctx.pop()
            if u in ctx.done:
                continue  # stale entry
            if u == goal:
                return ctx.path()
            ctx.done.add(u)
            ctx.expanded += 1
            if self.max_expansions is not None and ctx.expanded > self.max_expansions:
                raise SearchAborted(start, goal, ctx.expanded - 1)

            g_u = ctx.best[u]
            for v in self.G.adjacent(u):
                if v in ctx.done:
                    continue
                cand = g_u + self.G.distance(u, v)
                prev = ctx.best.get(v)
                if prev is None or cand < prev:
                    ctx.best[v] = cand
                    ctx.parent[v] = u
                    ctx.push(v, cand + self._h(v, goal))

        raise NoRoute(start, goal)


class DijkstraPathFinder(AStarPathFinder):
    def _h(self, u, goal):
        return 0.0
