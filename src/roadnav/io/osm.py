# io/osm.py
# Streams an OpenStreetMap XML document into an IngestSink.

import logging
import xml.sax as sax
from collections.abc import Iterable

from roadnav.app.protocols import IngestSink

log = logging.getLogger(__name__)

ALLOWED_HIGHWAY_TYPES = frozenset(
    {
        "motorway",
        "trunk",
        "primary",
        "secondary",
        "tertiary",
        "unclassified",
        "residential",
        "living_street",
        "motorway_link",
        "trunk_link",
        "primary_link",
        "secondary_link",
        "tertiary_link",
    }
)


class OSMHandler(sax.ContentHandler):
    """
    Emits sink.node() when a <node> closes (so its name tag is known) and
    sink.way() for every closed <way> whose highway tag is allowed.
    """

    def __init__(self, sink: IngestSink, highway_types: Iterable[str] = ALLOWED_HIGHWAY_TYPES):
        super().__init__()
        self.sink = sink
        self.highway_types = frozenset(highway_types)
        self._element: str | None = None
        self._node: tuple[int, float, float] | None = None
        self._node_name: str | None = None
        self._way_nodes: list[int] = []
        self._way_tags: dict[str, str] = {}
        self.nodes = 0
        self.ways = 0
        self.ways_skipped = 0

    def startElement(self, name, attrs):  # type: ignore[override]
        if name == "node":
            self._element = "node"
            self._node = (int(attrs["id"]), float(attrs["lon"]), float(attrs["lat"]))
            self._node_name = None
        elif name == "way":
            self._element = "way"
            self._way_nodes, self._way_tags = [], {}
        elif name == "nd" and self._element == "way":
            self._way_nodes.append(int(attrs["ref"]))
        elif name == "tag" and self._element == "node":
            if attrs.get("k") == "name":
                self._node_name = attrs.get("v")
        elif name == "tag" and self._element == "way":
            self._way_tags[attrs.get("k")] = attrs.get("v", "")

    def endElement(self, name):  # type: ignore[override]
        if name == "node" and self._node is not None:
            nid, lon, lat = self._node
            self.sink.node(nid, lon, lat, self._node_name)
            self.nodes += 1
            self._node, self._element = None, None
        elif name == "way":
            self._close_way()
            self._element = None

    def _close_way(self):
        if self._way_tags.get("highway") not in self.highway_types:
            self.ways_skipped += 1
            return
        self.sink.way(self._way_nodes, self._way_tags.get("name", ""))
        self.ways += 1


def load_osm(source, sink: IngestSink, highway_types: Iterable[str] = ALLOWED_HIGHWAY_TYPES):
    """
    Parse `source` (a path or a binary file object) into `sink`.

    Raises:
        FileNotFoundError: if a path does not exist.
        xml.sax.SAXParseException: if the document is not valid XML.
    """
    handler = OSMHandler(sink, highway_types)
    parser = sax.make_parser()
    parser.setContentHandler(handler)
    parser.parse(source)
    log.debug(
        "osm parsed: %d nodes, %d ways (%d non-highway skipped)",
        handler.nodes,
        handler.ways,
        handler.ways_skipped,
    )
    return handler
