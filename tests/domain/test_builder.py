import pytest

from roadnav.app.protocols import IngestSink
from roadnav.domain.builder import MapBuilder


def _events(b: MapBuilder):
    b.node(1, -122.260, 37.870, None)
    b.node(2, -122.260, 37.871, None)
    b.node(3, -122.259, 37.871, "Shattuck Junction")
    b.node(4, -122.250, 37.860, "Top Dog")  # point of interest, not on a way
    b.way([1, 2, 3], "Shattuck Ave")
    b.way([], "Empty Way")
    b.way([3, 404], "Dangling Rd")


def test_builder_is_an_ingest_sink():
    assert isinstance(MapBuilder(), IngestSink)


def test_poi_is_pruned_from_graph_but_still_searchable():
    b = MapBuilder()
    _events(b)
    m = b.finish()
    assert sorted(m.graph.vertices()) == [1, 2, 3]
    assert 4 not in m.graph
    assert [loc.id for loc in m.names.locate("top dog")] == [4]
    assert m.prefixes.prefix_search("to") == {"Top Dog"}
    assert m.prefixes.prefix_search("") == {"Top Dog", "Shattuck Junction"}
    assert (m.nodes_seen, m.ways_seen) == (4, 3)


def test_anomalies_are_tolerated():
    b = MapBuilder()
    _events(b)
    m = b.finish()
    assert m.graph.skipped_edges == 1
    assert m.graph.adjacent(3) == [2]


def test_finish_is_one_shot():
    b = MapBuilder()
    _events(b)
    b.finish()
    with pytest.raises(RuntimeError):
        b.finish()


def test_repeated_node_id_keeps_earlier_name_entries():
    b = MapBuilder()
    b.node(1, -122.260, 37.870, "Old Mill")
    b.node(1, -122.261, 37.871, "New Mill")
    b.node(2, -122.262, 37.872, None)
    b.way([1, 2], "Mill Rd")
    m = b.finish()
    assert m.graph.name(1) == "New Mill"
    assert m.graph.lon(1) == -122.261
    # the name indexes are append-only; both entries stay searchable
    assert [(loc.id, loc.lon) for loc in m.names.locate("old mill")] == [(1, -122.260)]
    assert [(loc.id, loc.lon) for loc in m.names.locate("new mill")] == [(1, -122.261)]
    assert m.prefixes.prefix_search("") == {"Old Mill", "New Mill"}
    assert m.nodes_seen == 3
