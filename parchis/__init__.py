from parchis.coordinates import BoardGeometry, BoardTables, Color, build_tables
from parchis.errors import (
    ConfigError,
    InvalidMessage,
    InvalidPieceReference,
    InvalidPlacement,
    ParchisError,
)
from parchis.messages import PlacementUpdate, SelectionEvent, Session
from parchis.motion import Animator, interpolate
from parchis.parchis import Board
from parchis.pieces import AT_BASE, AT_GOAL, Placement, PieceRegistry
from parchis.render import Palette, PieceRenderer, draw_board

__all__ = [
    "AT_BASE",
    "AT_GOAL",
    "Animator",
    "Board",
    "BoardGeometry",
    "BoardTables",
    "Color",
    "ConfigError",
    "InvalidMessage",
    "InvalidPieceReference",
    "InvalidPlacement",
    "Palette",
    "ParchisError",
    "PieceRegistry",
    "PieceRenderer",
    "Placement",
    "PlacementUpdate",
    "SelectionEvent",
    "Session",
    "build_tables",
    "draw_board",
    "interpolate",
]
