import pytest

from parchis.coordinates import Color
from parchis.errors import InvalidMessage
from parchis.messages import PlacementUpdate, SelectionEvent, Session, is_reset, parse_color
from parchis.pieces import AT_BASE, AT_GOAL, Placement


@pytest.mark.parametrize(
    "state, expected",
    [
        ({"kind": "AtBase"}, AT_BASE),
        ({"kind": "OnTrack", "index": 67}, Placement.on_track(67)),
        ({"kind": "InCorridor", "index": 0}, Placement.in_corridor(0)),
        ({"kind": "AtGoal"}, AT_GOAL),
    ],
)
def test_placement_update_from_message(state, expected):
    update = PlacementUpdate.from_message({"color": "yellow", "pieceId": 3, "state": state})
    assert update == PlacementUpdate(Color.YELLOW, 3, expected)
    assert update.dice is None


def test_dice_is_optional():
    update = PlacementUpdate.from_message({"color": "RED", "pieceId": 0, "state": {"kind": "AtBase"}, "dice": 6})
    assert update.dice == 6


@pytest.mark.parametrize(
    "message",
    [
        None,
        [],
        {"pieceId": 0, "state": {"kind": "AtBase"}},
        {"color": "RED", "state": {"kind": "AtBase"}},
        {"color": "RED", "pieceId": 0},
        {"color": "PURPLE", "pieceId": 0, "state": {"kind": "AtBase"}},
        {"color": 0, "pieceId": 0, "state": {"kind": "AtBase"}},
        {"color": "RED", "pieceId": 4, "state": {"kind": "AtBase"}},
        {"color": "RED", "pieceId": "0", "state": {"kind": "AtBase"}},
        {"color": "RED", "pieceId": 0, "state": "AtBase"},
        {"color": "RED", "pieceId": 0, "state": {"kind": "Home"}},
        {"color": "RED", "pieceId": 0, "state": {"kind": "OnTrack"}},
        {"color": "RED", "pieceId": 0, "state": {"kind": "InCorridor", "index": 7}},
        {"color": "RED", "pieceId": 0, "state": {"kind": "AtGoal", "index": 1}},
        {"color": "RED", "pieceId": 0, "state": {"kind": "AtBase"}, "dice": 7},
    ],
)
def test_malformed_messages(message):
    with pytest.raises(InvalidMessage):
        PlacementUpdate.from_message(message)


def test_parse_color():
    assert parse_color(" green ") is Color.GREEN
    assert parse_color(Color.BLUE) is Color.BLUE
    with pytest.raises(InvalidMessage):
        parse_color("ROJO")


def test_selection_event_message():
    assert SelectionEvent(Color.BLUE, 1).to_message() == {"color": "BLUE", "pieceId": 1}


def test_session_turn_is_explicit():
    session = Session(player_id=2, color=Color.YELLOW)
    assert not session.my_turn
    turned = session.with_turn(True)
    assert turned.my_turn and turned.color is Color.YELLOW and turned.player_id == 2
    assert not session.my_turn


def test_is_reset():
    assert is_reset({"kind": "reset"})
    assert not is_reset({"kind": "AtBase"})
    assert not is_reset(None)
