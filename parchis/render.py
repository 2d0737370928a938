"""
Board and piece rendering on a ``DrawingSurface``.

The static board is a pure function of the coordinate tables and the
palette. Pieces are resolved through the registry, optionally overridden by
the animator's sample for the current frame.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Tuple

import numpy as np
from gymnasium import logger

from parchis.coordinates import BoardTables, Color, Point, rotate
from parchis.motion import MotionSample
from parchis.pieces import BASE, CORRIDOR, GOAL, TRACK, PieceRegistry

RGB = Tuple[int, int, int]

# Goal triangle pointing at the top corridor, in cell units.
GOAL_TRIANGLE = np.array([(0.0, 0.0), (-0.5, -0.5), (0.5, -0.5)])


@dataclass(frozen=True)
class Palette:
    red: RGB = (192, 80, 77)
    blue: RGB = (79, 129, 189)
    yellow: RGB = (240, 173, 78)
    green: RGB = (119, 169, 104)
    background: RGB = (212, 165, 116)
    border: RGB = (139, 111, 71)
    cell: RGB = (245, 222, 179)
    text: RGB = (58, 42, 26)
    outline: RGB = (51, 51, 51)
    highlight: RGB = (255, 255, 255)
    shadow: RGB = (0, 0, 0)

    def color(self, color) -> RGB:
        return getattr(self, Color(color).name.lower())


DEFAULT_PALETTE = Palette()


def _cell_rect(center: Point, width: float, height: float):
    return (center[0] - width / 2, center[1] - height / 2, width, height)


def draw_board(surface, tables: BoardTables, palette: Palette = DEFAULT_PALETTE):
    """Draw background, ring, corridors, bases and goal, back to front."""
    geometry = tables.geometry
    cw, ch = geometry.cell_width, geometry.cell_height
    label_size = max(int(geometry.min_cell * 0.4), 8)

    surface.fill(palette.background)

    for cell in tables.cells:
        rect = _cell_rect(cell.position, cw, ch)
        fill = palette.color(cell.arm) if cell.is_entry else palette.cell
        surface.fill_rect(rect, fill)
        surface.stroke_rect(rect, palette.border, 2)
        if cell.is_safe and not cell.is_entry:
            surface.stroke_circle(cell.position, geometry.min_cell / 2.8, palette.border, 2)
        surface.text(str(cell.index), cell.position, palette.text, label_size, bold=True)

    for color, lane in tables.corridors.items():
        for index, position in enumerate(lane):
            rect = _cell_rect(position, cw, ch)
            surface.fill_rect(rect, palette.color(color), alpha=178)
            surface.stroke_rect(rect, palette.border, 2)
            surface.text(str(index), position, palette.highlight, label_size, bold=True)

    for color, base in tables.bases.items():
        tint = palette.color(color)
        surface.fill_circle(base.center, geometry.base_radius, tint, alpha=128)
        surface.stroke_circle(base.center, geometry.base_radius, tint, 5)
        for slot in base.slots:
            surface.fill_circle(slot, geometry.base_slot_radius, tint, alpha=128)
            surface.stroke_circle(slot, geometry.base_slot_radius, tint, 3)

    draw_goal(surface, tables, palette)


def draw_goal(surface, tables: BoardTables, palette: Palette = DEFAULT_PALETTE):
    geometry = tables.geometry
    for color in Color:
        triangle = geometry.to_pixels(rotate(GOAL_TRIANGLE, color))
        surface.fill_polygon([(float(x), float(y)) for x, y in triangle], palette.color(color))
    rect = _cell_rect(tables.goal, geometry.cell_width, geometry.cell_height)
    x, y, w, h = rect
    surface.stroke_path([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], palette.border, 3, closed=True)


def draw_status(surface, registry: PieceRegistry, palette: Palette = DEFAULT_PALETTE, dice=None):
    """Pieces at goal per color and the last dice value, top-left corner."""
    y = 16
    for color in registry.colors():
        at_goal = registry.summary(color).at_goal
        surface.text(f"{color.name} {at_goal}/{len(registry.pieces(color))}", (60, y), palette.color(color), 18, bold=True)
        y += 20
    if dice is not None:
        surface.text(f"Dice: {dice}", (60, y), palette.text, 18, bold=True)


class PieceRenderer:
    """Resolves, draws and hit-tests pieces."""

    def __init__(self, tables: BoardTables, registry: PieceRegistry, palette: Palette = DEFAULT_PALETTE):
        self.tables = tables
        self.registry = registry
        self.palette = palette
        self.selected: Optional[Tuple[Color, int]] = None

    @property
    def radius(self) -> float:
        return self.tables.geometry.selection_radius

    def resolve_position(self, color, piece_id) -> Optional[Point]:
        """Board coordinate of a piece for its current placement."""
        zone, index = self.registry.query(color, piece_id)
        return self.resolve(color, piece_id, (zone, index))

    def resolve(self, color, piece_id, placement) -> Optional[Point]:
        zone, index = placement
        if zone == GOAL:
            return self.tables.goal
        if zone == CORRIDOR:
            return self.tables.corridor(color, index)
        if zone == BASE:
            return self.tables.base_slot(color, piece_id)
        if zone == TRACK:
            return self.tables.track(index)
        return None

    def hit_test(self, point: Point, color) -> Optional[int]:
        """Lowest piece id of ``color`` within the selection radius of ``point``."""
        px, py = point
        for piece in self.registry.pieces(color):
            position = self.resolve_position(piece.color, piece.piece_id)
            if position is None:
                continue
            if math.hypot(px - position[0], py - position[1]) <= self.radius:
                return piece.piece_id
        return None

    def _stack_offsets(self) -> Dict[Hashable, Point]:
        groups = defaultdict(list)
        for piece in self.registry:
            position = self.resolve_position(piece.color, piece.piece_id)
            if position is not None:
                groups[(round(position[0], 3), round(position[1], 3))].append(piece.key)

        step = self.radius * 0.4
        offsets = {}
        for keys in groups.values():
            if len(keys) < 2:
                continue
            for rank, key in enumerate(keys):
                offsets[key] = ((rank % 4 - 1.5) * step, (rank // 4) * step)
        return offsets

    def drawn_positions(self) -> Dict[Hashable, Point]:
        """Resting coordinate of every resolvable piece, stack offset included."""
        offsets = self._stack_offsets()
        positions = {}
        for piece in self.registry:
            position = self.resolve_position(piece.color, piece.piece_id)
            if position is None:
                continue
            dx, dy = offsets.get(piece.key, (0.0, 0.0))
            positions[piece.key] = (position[0] + dx, position[1] + dy)
        return positions

    def draw(self, surface, motion: Optional[Dict[Hashable, MotionSample]] = None):
        """Draw every piece, moving pieces at their sampled coordinate."""
        motion = motion or {}
        resting = self.drawn_positions()
        for piece in self.registry:
            sample = motion.get(piece.key)
            if sample is not None:
                self.draw_piece(surface, piece.color, piece.piece_id, (sample.x, sample.y - sample.hop), moving=True)
                continue
            position = resting.get(piece.key)
            if position is None:
                logger.warn("no coordinate for %r, skipped this frame", piece)
                continue
            self.draw_piece(surface, piece.color, piece.piece_id, position)

    def draw_piece(self, surface, color, piece_id, position: Point, moving=False):
        radius = self.radius
        palette = self.palette
        x, y = position

        surface.fill_circle((x + 3, y + 3), radius, palette.shadow, alpha=128)
        surface.fill_circle((x, y), radius, palette.color(color))

        if self.selected == (color, piece_id):
            surface.stroke_circle((x, y), radius, palette.highlight, 5)
            surface.stroke_circle((x, y), radius + 3, palette.highlight, 2)
        elif moving:
            surface.stroke_circle((x, y), radius, palette.highlight, 3)
        else:
            surface.stroke_circle((x, y), radius, palette.outline, 3)

        surface.text(str(piece_id), (x, y), palette.highlight, max(int(radius * 1.2), 8), bold=True)
