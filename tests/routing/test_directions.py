import pytest

from roadnav.domain.builder import MapBuilder
from roadnav.domain.entities.directions import DirectionStep, TurnKind
from roadnav.domain.geodesy import relative_turn
from roadnav.routing.directions import DirectionsGenerator

A, B, C, D, E, F = 1, 2, 3, 4, 5, 6


@pytest.fixture
def town():
    b = MapBuilder()
    b.node(A, 0.0, 0.0)
    b.node(B, 0.0, 1.0)
    b.node(C, 1.0, 1.0)
    b.node(D, 1.0, 2.0)
    b.node(E, 1.0, 2.0)  # same spot as D
    b.node(F, 1.0, 3.0)
    b.way([A, B, C], "Elm St")
    b.way([C, D], "Oak Ave")
    b.way([D, E], "Pine Rd")
    b.way([E, F], "Ash Ln")
    return b.finish().graph


def test_two_roads_give_two_steps(town):
    steps = DirectionsGenerator(town).directions([A, B, C, D])
    assert len(steps) == 2
    first, second = steps
    assert first.turn is TurnKind.START
    assert first.road == "Elm St"
    assert first.distance_miles == pytest.approx(town.distance(A, B) + town.distance(B, C))
    assert second.road == "Oak Ave"
    assert second.distance_miles == pytest.approx(town.distance(C, D))
    expected_turn = TurnKind.classify(relative_turn(town.bearing(B, C), town.bearing(C, D)))
    assert second.turn is expected_turn
    assert second.turn is TurnKind.LEFT  # heading east, then north


def test_single_node_path_is_one_zero_length_start(town):
    assert DirectionsGenerator(town).directions([B]) == [DirectionStep(TurnKind.START, "Elm St", 0.0)]


def test_empty_path_is_rejected(town):
    with pytest.raises(ValueError):
        DirectionsGenerator(town).directions([])


def test_zero_length_intermediate_step_is_suppressed(town):
    steps = DirectionsGenerator(town).directions([A, B, C, D, E, F])
    assert [s.road for s in steps] == ["Elm St", "Oak Ave", "Ash Ln"]
    assert steps[-1].turn is TurnKind.STRAIGHT
    assert steps[-1].distance_miles == pytest.approx(town.distance(E, F))


def test_zero_length_terminal_step_is_kept(town):
    steps = DirectionsGenerator(town).directions([A, B, C, D, E])
    assert [s.road for s in steps] == ["Elm St", "Oak Ave", "Pine Rd"]
    assert steps[-1].distance_miles == 0.0


def test_leading_road_change_drops_empty_start(town):
    # C was last stamped by Oak Ave, but the walk heads west along Elm St
    assert town.way_name(C) == "Oak Ave"
    steps = DirectionsGenerator(town).directions([C, B, A])
    assert len(steps) == 1
    assert steps[0].road == "Elm St"
    assert steps[0].turn is TurnKind.LEFT
    assert steps[0].distance_miles == pytest.approx(town.distance(C, B) + town.distance(B, A))


def test_steps_survive_text(town):
    for step in DirectionsGenerator(town).directions([A, B, C, D, E, F]):
        assert DirectionStep.from_text(str(step)).approx_equal(step)
