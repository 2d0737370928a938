"""
Placement state of the 16 pieces.

The registry only records what it is told: every transition comes from an
explicit ``apply`` call and is never checked against the rules of the game.
"""

from __future__ import annotations

from collections import namedtuple

from parchis.coordinates import CORRIDOR_LEN, PIECES, TRACK_LEN, Color
from parchis.errors import InvalidPieceReference, InvalidPlacement, ParchisError

BASE = "base"
TRACK = "track"
CORRIDOR = "corridor"
GOAL = "goal"

ZONE_LIMITS = {BASE: None, TRACK: TRACK_LEN, CORRIDOR: CORRIDOR_LEN, GOAL: None}
ZONE_NAMES = {BASE: "AtBase", TRACK: "OnTrack", CORRIDOR: "InCorridor", GOAL: "AtGoal"}


class Placement(namedtuple("Placement", ["zone", "index"])):
    """(zone, index) of a piece; ``index`` is only set on the track and corridor."""

    __slots__ = ()

    def __new__(cls, zone, index=None):
        if zone not in ZONE_LIMITS:
            raise InvalidPlacement(f"unknown zone {zone!r}")
        limit = ZONE_LIMITS[zone]
        if limit is None:
            if index is not None:
                raise InvalidPlacement(f"{ZONE_NAMES[zone]} takes no index, got {index!r}")
        elif isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < limit:
            raise InvalidPlacement(f"{ZONE_NAMES[zone]} index must be in 0..{limit - 1}, got {index!r}")
        return super().__new__(cls, zone, index)

    @classmethod
    def at_base(cls):
        return cls(BASE)

    @classmethod
    def on_track(cls, index):
        return cls(TRACK, index)

    @classmethod
    def in_corridor(cls, index):
        return cls(CORRIDOR, index)

    @classmethod
    def at_goal(cls):
        return cls(GOAL)

    def __str__(self):
        name = ZONE_NAMES[self.zone]
        return name if self.index is None else f"{name}({self.index})"


AT_BASE = Placement.at_base()
AT_GOAL = Placement.at_goal()

PlacementSummary = namedtuple("PlacementSummary", ["at_base", "on_track", "in_corridor", "at_goal"])


class Piece:
    """A token. Identity is fixed; only the registry changes ``placement``."""

    __slots__ = ("_color", "_piece_id", "placement")

    def __init__(self, color, piece_id):
        self._color = Color(color)
        self._piece_id = piece_id
        self.placement = AT_BASE

    @property
    def color(self):
        return self._color

    @property
    def piece_id(self):
        return self._piece_id

    @property
    def key(self):
        return (self._color, self._piece_id)

    def __repr__(self):
        return f"Piece({self._color.name}, {self._piece_id}, {self.placement})"


class PieceRegistry:
    def __init__(self):
        self._pieces = {}

    @classmethod
    def for_all_colors(cls):
        registry = cls()
        for color in Color:
            registry.create(color)
        return registry

    def create(self, color):
        """Create the 4 pieces of ``color``, all at base."""
        color = Color(color)
        if color in self._pieces:
            raise ParchisError(f"pieces for {color.name} already exist")
        pieces = tuple(Piece(color, i) for i in range(PIECES))
        self._pieces[color] = pieces
        return pieces

    def _get(self, color, piece_id):
        try:
            pieces = self._pieces[Color(color)]
        except (ValueError, KeyError):
            raise InvalidPieceReference(color, piece_id) from None
        if isinstance(piece_id, bool) or not isinstance(piece_id, int) or not 0 <= piece_id < len(pieces):
            raise InvalidPieceReference(color, piece_id)
        return pieces[piece_id]

    def piece(self, color, piece_id):
        return self._get(color, piece_id)

    def apply(self, color, piece_id, placement):
        """Overwrite the placement of a piece and return the previous one."""
        if not isinstance(placement, Placement):
            raise InvalidPlacement(f"expected a Placement, got {placement!r}")
        piece = self._get(color, piece_id)
        previous = piece.placement
        piece.placement = placement
        return previous

    def query(self, color, piece_id):
        return self._get(color, piece_id).placement

    def summary(self, color):
        counts = {BASE: 0, TRACK: 0, CORRIDOR: 0, GOAL: 0}
        for piece in self._pieces.get(Color(color), ()):
            counts[piece.placement.zone] += 1
        return PlacementSummary(counts[BASE], counts[TRACK], counts[CORRIDOR], counts[GOAL])

    def reset_all(self):
        for piece in self:
            piece.placement = AT_BASE

    def pieces(self, color):
        return self._pieces.get(Color(color), ())

    def colors(self):
        return list(self._pieces)

    def __iter__(self):
        for color in sorted(self._pieces):
            yield from self._pieces[color]

    def __len__(self):
        return sum(len(p) for p in self._pieces.values())
