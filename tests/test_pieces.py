import pytest

from parchis.coordinates import Color
from parchis.errors import InvalidPieceReference, InvalidPlacement, ParchisError
from parchis.pieces import AT_BASE, AT_GOAL, Placement, PieceRegistry, PlacementSummary


def test_create_four_pieces_per_color():
    registry = PieceRegistry()
    for color in Color:
        pieces = registry.create(color)
        assert [p.piece_id for p in pieces] == [0, 1, 2, 3]
        assert all(p.placement == AT_BASE for p in pieces)
    assert len(registry) == 16
    for color in Color:
        assert registry.summary(color) == PlacementSummary(at_base=4, on_track=0, in_corridor=0, at_goal=0)


def test_create_twice_keeps_identities():
    registry = PieceRegistry()
    first = registry.create(Color.RED)
    with pytest.raises(ParchisError):
        registry.create(Color.RED)
    assert registry.pieces(Color.RED) is first


def test_apply_returns_previous_and_query_sees_new(registry):
    previous = registry.apply(Color.BLUE, 2, Placement.on_track(17))
    assert previous == AT_BASE
    assert registry.query(Color.BLUE, 2) == Placement.on_track(17)

    previous = registry.apply(Color.BLUE, 2, AT_GOAL)
    assert previous == Placement.on_track(17)
    assert registry.query(Color.BLUE, 2) == AT_GOAL


def test_apply_does_not_check_the_rules(registry):
    """Any jump is recorded as told, even straight from base to goal."""
    registry.apply(Color.GREEN, 0, AT_GOAL)
    registry.apply(Color.GREEN, 0, Placement.in_corridor(0))
    registry.apply(Color.GREEN, 1, Placement.on_track(3))
    assert registry.summary(Color.GREEN) == PlacementSummary(2, 1, 1, 0)


@pytest.mark.parametrize("color, piece_id", [("PURPLE", 0), (7, 0), (Color.RED, 4), (Color.RED, -1), (Color.RED, "1")])
def test_unknown_piece_is_reported_and_state_unchanged(registry, color, piece_id):
    before = [p.placement for p in registry]
    with pytest.raises(InvalidPieceReference):
        registry.apply(color, piece_id, AT_GOAL)
    with pytest.raises(InvalidPieceReference):
        registry.query(color, piece_id)
    assert [p.placement for p in registry] == before


def test_unknown_piece_is_a_key_error(registry):
    with pytest.raises(KeyError):
        registry.query(Color.YELLOW, 9)


def test_reset_all_returns_pieces_to_base(registry):
    pieces = list(registry)
    registry.apply(Color.RED, 0, AT_GOAL)
    registry.apply(Color.YELLOW, 3, Placement.in_corridor(6))
    registry.reset_all()
    assert all(p.placement == AT_BASE for p in registry)
    assert list(registry) == pieces


def test_piece_identity_is_read_only(registry):
    piece = registry.piece(Color.RED, 1)
    assert piece.key == (Color.RED, 1)
    with pytest.raises(AttributeError):
        piece.piece_id = 3


@pytest.mark.parametrize(
    "zone, index",
    [("track", 68), ("track", -1), ("corridor", 7), ("corridor", None), ("base", 2), ("goal", 0), ("home", 1), ("track", True)],
)
def test_placement_validates_index(zone, index):
    with pytest.raises(InvalidPlacement):
        Placement(zone, index)


def test_placement_str():
    assert str(AT_BASE) == "AtBase"
    assert str(Placement.on_track(12)) == "OnTrack(12)"
    assert str(Placement.in_corridor(6)) == "InCorridor(6)"
    assert str(AT_GOAL) == "AtGoal"


def test_apply_requires_a_placement(registry):
    with pytest.raises(InvalidPlacement):
        registry.apply(Color.RED, 0, ("track", 3))
    assert registry.query(Color.RED, 0) == AT_BASE
