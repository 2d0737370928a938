"""
Drawing surface used by the renderers.

The renderers only need the handful of primitives declared by
``DrawingSurface``; ``PygameSurface`` provides them on top of a
``pygame.Surface``.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence, Tuple

import numpy as np
import pygame

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]
RGB = Tuple[int, int, int]


def _rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(*(int(round(v)) for v in rect))


class DrawingSurface(Protocol):
    width: int
    height: int

    def fill(self, color: RGB) -> None: ...

    def fill_rect(self, rect: Rect, color: RGB, alpha: int = 255) -> None: ...

    def stroke_rect(self, rect: Rect, color: RGB, width: int = 1) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: RGB, alpha: int = 255) -> None: ...

    def stroke_circle(self, center: Point, radius: float, color: RGB, width: int = 1) -> None: ...

    def fill_polygon(self, points: Sequence[Point], color: RGB, alpha: int = 255) -> None: ...

    def stroke_path(self, points: Sequence[Point], color: RGB, width: int = 1, closed: bool = False) -> None: ...

    def text(self, text: str, center: Point, color: RGB, size: int = 14, bold: bool = False) -> None: ...


class PygameSurface:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts = {}

    @classmethod
    def offscreen(cls, width, height):
        return cls(pygame.Surface((int(width), int(height))))

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def _layer(self, rect: Rect):
        x, y, w, h = (int(math.floor(rect[0])), int(math.floor(rect[1])),
                      int(math.ceil(rect[2])) + 1, int(math.ceil(rect[3])) + 1)
        return pygame.Surface((max(w, 1), max(h, 1)), flags=pygame.SRCALPHA), (x, y)

    def fill(self, color):
        self.surface.fill(color)

    def fill_rect(self, rect, color, alpha=255):
        if alpha >= 255:
            pygame.draw.rect(self.surface, color, _rect(rect))
            return
        layer, origin = self._layer(rect)
        layer.fill((*color, alpha))
        self.surface.blit(layer, origin)

    def stroke_rect(self, rect, color, width=1):
        pygame.draw.rect(self.surface, color, _rect(rect), int(width))

    def fill_circle(self, center, radius, color, alpha=255):
        if alpha >= 255:
            pygame.draw.circle(self.surface, color, center, radius)
            return
        layer, origin = self._layer((center[0] - radius, center[1] - radius, 2 * radius, 2 * radius))
        local = (center[0] - origin[0], center[1] - origin[1])
        pygame.draw.circle(layer, (*color, alpha), local, radius)
        self.surface.blit(layer, origin)

    def stroke_circle(self, center, radius, color, width=1):
        pygame.draw.circle(self.surface, color, center, radius, int(width))

    def fill_polygon(self, points, color, alpha=255):
        if alpha >= 255:
            pygame.draw.polygon(self.surface, color, points)
            return
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        layer, origin = self._layer((min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys)))
        local = [(x - origin[0], y - origin[1]) for x, y in points]
        pygame.draw.polygon(layer, (*color, alpha), local)
        self.surface.blit(layer, origin)

    def stroke_path(self, points, color, width=1, closed=False):
        if len(points) < 2:
            return
        pygame.draw.lines(self.surface, color, closed, points, int(width))

    def _font(self, size, bold):
        font = self._fonts.get((size, bold))
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self._fonts[(size, bold)] = font
        return font

    def text(self, text, center, color, size=14, bold=False):
        image = self._font(size, bold).render(text, True, color)
        self.surface.blit(image, image.get_rect(center=(int(center[0]), int(center[1]))))

    def to_array(self) -> np.ndarray:
        """Frame as an (height, width, 3) uint8 array."""
        obs = np.array(pygame.surfarray.pixels3d(self.surface))
        return np.transpose(obs, (1, 0, 2))
