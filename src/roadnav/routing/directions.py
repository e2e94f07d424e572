# routing/directions.py
from collections.abc import Sequence

from roadnav.app.protocols import GraphView
from roadnav.domain.entities.directions import DirectionStep, TurnKind
from roadnav.domain.geodesy import relative_turn


class DirectionsGenerator:
    """
    Turn a node path into turn-by-turn steps.

    A new step starts whenever the road of the next hop changes. Its turn is
    the heading change at the junction (incoming hop vs outgoing hop).
    Zero-length steps are dropped except the last one.
    """

    def __init__(self, graph: GraphView):
        self.G = graph

    def directions(self, path: Sequence[int]) -> list[DirectionStep]:
        if not path:
            raise ValueError("directions() needs a path with at least one node")

        steps: list[DirectionStep] = []
        turn, road, dist = TurnKind.START, self.G.way_name(path[0]), 0.0
        heading_in: float | None = None

        for prev, node in zip(path, path[1:]):
            heading_out = self.G.bearing(prev, node)
            hop_road = self.G.edge_way_name(prev, node)
            hop_len = self.G.distance(prev, node)
            if hop_road != road:
                if dist != 0.0:
                    steps.append(DirectionStep(turn, road, dist))
                # first hop: no incoming heading, so the compass bearing is classified
                rel = heading_out if heading_in is None else relative_turn(heading_in, heading_out)
                turn, road, dist = TurnKind.classify(rel), hop_road, hop_len
            else:
                dist += hop_len
            heading_in = heading_out

        steps.append(DirectionStep(turn, road, dist))
        return steps
