"""
Messages exchanged with the authority and the session context.

Placement update (authority -> display)::

    {"color": "RED", "pieceId": 2, "state": {"kind": "OnTrack", "index": 12}, "dice": 5}

Reset (authority -> display)::

    {"kind": "reset"}

Selection (display -> authority)::

    {"color": "RED", "pieceId": 2}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from parchis.coordinates import PIECES, Color
from parchis.errors import InvalidMessage, InvalidPlacement
from parchis.pieces import BASE, CORRIDOR, GOAL, TRACK, Placement

STATE_KINDS = {"AtBase": BASE, "OnTrack": TRACK, "InCorridor": CORRIDOR, "AtGoal": GOAL}
RESET = "reset"


def parse_color(value) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidMessage(f"unknown color {value!r}")


def parse_placement(state) -> Placement:
    if not isinstance(state, Mapping):
        raise InvalidMessage(f"state must be a mapping, got {state!r}")
    kind = state.get("kind")
    if kind not in STATE_KINDS:
        raise InvalidMessage(f"unknown state kind {kind!r}")
    try:
        return Placement(STATE_KINDS[kind], state.get("index"))
    except InvalidPlacement as e:
        raise InvalidMessage(str(e)) from e


@dataclass(frozen=True)
class Session:
    """Who this display plays for; replaces connection-wide globals."""

    player_id: int = -1
    color: Optional[Color] = None
    my_turn: bool = False

    def with_turn(self, my_turn: bool) -> "Session":
        return Session(self.player_id, self.color, my_turn)


@dataclass(frozen=True)
class PlacementUpdate:
    color: Color
    piece_id: int
    placement: Placement
    dice: Optional[int] = None

    @classmethod
    def from_message(cls, message: Mapping) -> "PlacementUpdate":
        if not isinstance(message, Mapping):
            raise InvalidMessage(f"message must be a mapping, got {message!r}")
        for field in ("color", "pieceId", "state"):
            if field not in message:
                raise InvalidMessage(f"missing field {field!r}")

        piece_id = message["pieceId"]
        if isinstance(piece_id, bool) or not isinstance(piece_id, int) or not 0 <= piece_id < PIECES:
            raise InvalidMessage(f"pieceId must be in 0..{PIECES - 1}, got {piece_id!r}")

        dice = message.get("dice")
        if dice is not None and (isinstance(dice, bool) or not isinstance(dice, int) or not 1 <= dice <= 6):
            raise InvalidMessage(f"dice must be in 1..6, got {dice!r}")

        return cls(parse_color(message["color"]), piece_id, parse_placement(message["state"]), dice)


@dataclass(frozen=True)
class SelectionEvent:
    color: Color
    piece_id: int

    def to_message(self) -> dict:
        return {"color": self.color.name, "pieceId": self.piece_id}


def is_reset(message) -> bool:
    return isinstance(message, Mapping) and message.get("kind") == RESET
