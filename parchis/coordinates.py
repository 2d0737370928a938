"""
Board coordinate model for the Parchís cross.

Coordinates are in pygame coordinate system (top-left at 0,0).
x increases to the right, y increases downward.

Ring: 68 shared cells (0-67), four arms of 17 cells, one per color
Home corridors: 7 cells per color (0-6), the last one touches the goal
Bases: a center plus 4 slots per color
Goal: the board center

Every table is generated from a single arm template written in cell units
around the goal, rotated a quarter turn per color and scaled by the cell
size. Arm k is arm 0 turned k quarter turns clockwise on screen, so the
ring runs top, right, bottom, left.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from parchis.errors import ConfigError

Point = Tuple[float, float]

TRACK_LEN = 68
ARM_LEN = 17
CORRIDOR_LEN = 7
PIECES = 4


class Color(enum.IntEnum):
    """Seat colors; the value is the seat and the arm it owns."""

    RED = 0
    BLUE = 1
    YELLOW = 2
    GREEN = 3


# Arm 0 in cell units, relative to the goal. It enters at (-1,-5), runs out
# to the tip of the top arm, comes back in along the other column, cuts the
# inner corner diagonally and runs along the upper row of the right arm.
ARM_TEMPLATE = np.array(
    [(-1, y) for y in range(-5, -10, -1)]
    + [(0, -9)]
    + [(1, y) for y in range(-9, -1)]
    + [(x, -1) for x in range(2, 5)],
    dtype=np.int64,
)

# Offsets inside an arm: entry cell, arm tip, and the cell level with the
# entry on the inward column.
SAFE_OFFSETS = (0, 5, 10)

# Ring cell on the outward column beside the first corridor cell.
APPROACH_OFFSET = 2

CORRIDOR_TEMPLATE = np.array([(0, y) for y in range(-7, 0)], dtype=np.int64)
BASE_TEMPLATE = np.array([-5.5, -5.5])

# Slot order: top-left, top-right, bottom-left, bottom-right.
SLOT_SIGNS = ((-1, -1), (1, -1), (-1, 1), (1, 1))

# (x, y) -> (-y, x): a quarter turn clockwise with y pointing down.
QUARTER_TURN = np.array([[0, -1], [1, 0]], dtype=np.int64)
ROTATIONS = [np.linalg.matrix_power(QUARTER_TURN, k) for k in range(4)]


def rotate(cells, quarter_turns):
    """Rotate an (N, 2) array of cell offsets by a number of quarter turns."""
    return np.asarray(cells) @ ROTATIONS[quarter_turns % 4].T


@dataclass(frozen=True)
class BoardGeometry:
    cell_width: float = 57
    cell_height: float = 38
    canvas_width: float = 1180
    canvas_height: float = 880

    def __post_init__(self):
        for name in ("cell_width", "cell_height", "canvas_width", "canvas_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not value > 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")

    @classmethod
    def from_config(cls, config: Mapping) -> "BoardGeometry":
        """Build from a mapping using either ``cellWidth`` or ``cell_width`` keys.

        All four sizes are required; the dataclass defaults only apply when
        constructing ``BoardGeometry`` directly.
        """
        aliases = {
            "cellWidth": "cell_width",
            "cellHeight": "cell_height",
            "canvasWidth": "canvas_width",
            "canvasHeight": "canvas_height",
        }
        kwargs = {}
        for key, value in config.items():
            name = aliases.get(key, key)
            if name not in aliases.values():
                raise ConfigError(f"unknown geometry key {key!r}")
            kwargs[name] = value
        missing = [name for name in aliases.values() if name not in kwargs]
        if missing:
            raise ConfigError(f"missing geometry keys: {', '.join(missing)}")
        return cls(**kwargs)

    @property
    def center(self) -> Point:
        return (self.canvas_width / 2, self.canvas_height / 2)

    @property
    def min_cell(self) -> float:
        return min(self.cell_width, self.cell_height)

    @property
    def selection_radius(self) -> float:
        return self.min_cell / 2.5

    @property
    def base_radius(self) -> float:
        return self.min_cell * 3.5

    @property
    def base_slot_offset(self) -> float:
        return self.base_radius * 0.4

    @property
    def base_slot_radius(self) -> float:
        return self.base_radius / 7.7

    def to_pixels(self, cells) -> np.ndarray:
        """Scale cell offsets around the center into canvas coordinates."""
        cx, cy = self.center
        cells = np.asarray(cells, dtype=np.float64)
        return cells * (self.cell_width, self.cell_height) + (cx, cy)


@dataclass(frozen=True)
class TrackCell:
    index: int
    position: Point
    arm: Color
    is_entry: bool
    is_safe: bool


@dataclass(frozen=True)
class Base:
    center: Point
    slots: Tuple[Point, Point, Point, Point]


def _point(row) -> Point:
    return (float(row[0]), float(row[1]))


@dataclass(frozen=True)
class BoardTables:
    """Lookup tables for one geometry. Lookups out of range return ``None``."""

    geometry: BoardGeometry
    cells: Tuple[TrackCell, ...]
    corridors: Dict[Color, Tuple[Point, ...]]
    bases: Dict[Color, Base]
    goal: Point

    def track(self, index) -> Optional[Point]:
        if not _in_range(index, TRACK_LEN):
            return None
        return self.cells[index].position

    def cell(self, index) -> Optional[TrackCell]:
        if not _in_range(index, TRACK_LEN):
            return None
        return self.cells[index]

    def corridor(self, color, index) -> Optional[Point]:
        lane = self.corridors.get(color)
        if lane is None or not _in_range(index, CORRIDOR_LEN):
            return None
        return lane[index]

    def base(self, color) -> Optional[Base]:
        return self.bases.get(color)

    def base_slot(self, color, piece_id) -> Optional[Point]:
        base = self.bases.get(color)
        if base is None or not _in_range(piece_id, PIECES):
            return None
        return base.slots[piece_id]

    @staticmethod
    def entry_index(color) -> int:
        return Color(color) * ARM_LEN

    @staticmethod
    def approach_index(color) -> int:
        return (Color(color) * ARM_LEN + APPROACH_OFFSET) % TRACK_LEN


def _in_range(index, length) -> bool:
    return isinstance(index, (int, np.integer)) and not isinstance(index, bool) and 0 <= index < length


def build_tables(geometry: Optional[BoardGeometry] = None) -> BoardTables:
    """Generate every coordinate of the board for ``geometry``."""
    geometry = geometry or BoardGeometry()

    cells = []
    corridors = {}
    bases = {}
    slot_offset = geometry.base_slot_offset
    for color in Color:
        arm = geometry.to_pixels(rotate(ARM_TEMPLATE, color))
        for offset, row in enumerate(arm):
            cells.append(
                TrackCell(
                    index=color * ARM_LEN + offset,
                    position=_point(row),
                    arm=color,
                    is_entry=offset == 0,
                    is_safe=offset in SAFE_OFFSETS,
                )
            )

        lane = geometry.to_pixels(rotate(CORRIDOR_TEMPLATE, color))
        corridors[color] = tuple(_point(row) for row in lane)

        bx, by = _point(geometry.to_pixels(rotate(BASE_TEMPLATE, color)))
        slots = tuple((bx + sx * slot_offset, by + sy * slot_offset) for sx, sy in SLOT_SIGNS)
        bases[color] = Base(center=(bx, by), slots=slots)

    return BoardTables(
        geometry=geometry,
        cells=tuple(cells),
        corridors=corridors,
        bases=bases,
        goal=geometry.center,
    )
