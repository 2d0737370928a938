# noqa: D212, D415
"""
# Parchís

Display for a four-player Parchís board driven by an external authority.

The authority pushes placement updates; the display records them, animates
each piece from its previous coordinate to the new one and reports clicks on
the session's own pieces as selection events. It never checks whether a
move is legal.
"""

from __future__ import annotations

import time
from typing import Callable, Mapping, Optional

import pygame
from gymnasium import logger

from parchis.coordinates import BoardGeometry, build_tables
from parchis.errors import ConfigError, InvalidMessage
from parchis.messages import PlacementUpdate, SelectionEvent, Session, is_reset
from parchis.motion import DEFAULT_DURATION, DEFAULT_HOP, Animator
from parchis.pieces import PieceRegistry
from parchis.render import DEFAULT_PALETTE, PieceRenderer, draw_board, draw_status
from parchis.surface import PygameSurface


class Board:
    metadata = {
        "render_modes": ["human", "rgb_array"],
        "name": "parchis_v0",
        "render_fps": 60,
    }

    def __init__(
        self,
        render_mode=None,
        geometry=None,
        session: Optional[Session] = None,
        on_select: Optional[Callable[[SelectionEvent], None]] = None,
        palette=DEFAULT_PALETTE,
        animation_duration=DEFAULT_DURATION,
        hop_amplitude=DEFAULT_HOP,
        clock: Optional[Callable[[], float]] = None,
    ):
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ConfigError(f"unknown render_mode {render_mode!r}")
        if isinstance(geometry, Mapping):
            geometry = BoardGeometry.from_config(geometry)

        self.render_mode = render_mode
        self.tables = build_tables(geometry)
        self.geometry = self.tables.geometry
        self.palette = palette
        self.registry = PieceRegistry.for_all_colors()
        self.pieces = PieceRenderer(self.tables, self.registry, palette)
        self.animator = Animator(animation_duration, hop_amplitude)
        self.session = session or Session()
        self.on_select = on_select
        self.clock = clock or time.monotonic

        self.dice = None
        self.render_pending = True

        self.screen = None
        self.frame_clock = None

    # ------------------------------------------------------------
    # Authority commands
    # ------------------------------------------------------------

    def reset(self):
        """Send every piece back to its base, keeping the pieces themselves."""
        self.registry.reset_all()
        self.animator.cancel_all()
        self.pieces.selected = None
        self.dice = None
        self.render_pending = True

    def apply_update(self, update: PlacementUpdate, now=None):
        """Record a placement and start its animation; returns the previous placement."""
        now = self.clock() if now is None else now
        color, piece_id = update.color, update.piece_id

        key = (color, piece_id)
        before = self.pieces.drawn_positions()
        previous = self.registry.apply(color, piece_id, update.placement)
        after = self.pieces.drawn_positions()

        start, end = before.get(key), after.get(key)
        if start is not None and end is not None and (start != end or self.animator.running(key)):
            self.animator.start(key, start, end, now)
        else:
            self.animator.cancel(key)

        # pieces sharing the old or new cell slide to their new stack offset
        for other, target in after.items():
            if other == key or before.get(other) in (None, target):
                continue
            self.animator.start(other, before[other], target, now, hop_amplitude=0.0)

        if update.dice is not None:
            self.dice = update.dice
        self.render_pending = True
        return previous

    def handle_message(self, message, now=None):
        """Apply a raw authority message; malformed messages are logged and skipped."""
        if is_reset(message):
            self.reset()
            return None
        try:
            update = PlacementUpdate.from_message(message)
        except InvalidMessage as e:
            logger.warn("skipped authority message: %s", e)
            return None
        return self.apply_update(update, now)

    # ------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------

    def set_turn(self, my_turn: bool):
        self.session = self.session.with_turn(my_turn)

    def click(self, point) -> Optional[SelectionEvent]:
        """Hit-test a click against the session's pieces and emit a selection."""
        session = self.session
        if session.color is None:
            logger.warn("click ignored, the session has no color")
            return None
        if not session.my_turn:
            logger.warn("click ignored, it is not this player's turn")
            return None

        piece_id = self.pieces.hit_test(point, session.color)
        self.render_pending = True
        if piece_id is None:
            self.pieces.selected = None
            return None

        self.pieces.selected = (session.color, piece_id)
        event = SelectionEvent(session.color, piece_id)
        if self.on_select is not None:
            self.on_select(event)
        return event

    # ------------------------------------------------------------
    # Render
    # ------------------------------------------------------------

    def _init_screen(self):
        size = (int(self.geometry.canvas_width), int(self.geometry.canvas_height))
        pygame.init()
        if self.render_mode == "human":
            pygame.display.set_caption("Parchís")
            self.screen = PygameSurface(pygame.display.set_mode(size))
        else:
            self.screen = PygameSurface(pygame.Surface(size))
        self.frame_clock = pygame.time.Clock()

    def render(self, now=None):
        if self.render_mode is None:
            logger.warn("Render called without render_mode.")
            return None

        if self.screen is None:
            self._init_screen()

        now = self.clock() if now is None else now
        motion = self.animator.advance(now)

        draw_board(self.screen, self.tables, self.palette)
        draw_status(self.screen, self.registry, self.palette, self.dice)
        self.pieces.draw(self.screen, motion)
        self.render_pending = self.animator.active

        if self.render_mode == "human":
            pygame.display.update()
            return None
        return self.screen.to_array()

    def run_frame(self):
        """One iteration of the human-mode loop; False once the window is closed."""
        if self.screen is None:
            self._init_screen()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.click(event.pos)

        if self.render_pending or self.animator.active:
            self.render()
        self.frame_clock.tick(self.metadata["render_fps"])
        return True

    def close(self):
        if self.screen is not None:
            pygame.quit()
            self.screen = None
            self.frame_clock = None
