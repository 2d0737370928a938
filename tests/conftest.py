import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from parchis.coordinates import BoardGeometry, build_tables
from parchis.pieces import PieceRegistry


class RecordingSurface:
    """DrawingSurface that keeps every call instead of drawing."""

    width = 1180
    height = 880

    def __init__(self):
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def fill(self, color):
        self._record("fill", color)

    def fill_rect(self, rect, color, alpha=255):
        self._record("fill_rect", rect, color, alpha=alpha)

    def stroke_rect(self, rect, color, width=1):
        self._record("stroke_rect", rect, color, width=width)

    def fill_circle(self, center, radius, color, alpha=255):
        self._record("fill_circle", center, radius, color, alpha=alpha)

    def stroke_circle(self, center, radius, color, width=1):
        self._record("stroke_circle", center, radius, color, width=width)

    def fill_polygon(self, points, color, alpha=255):
        self._record("fill_polygon", points, color, alpha=alpha)

    def stroke_path(self, points, color, width=1, closed=False):
        self._record("stroke_path", points, color, width=width, closed=closed)

    def text(self, text, center, color, size=14, bold=False):
        self._record("text", text, center, color, size=size, bold=bold)

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def geometry():
    return BoardGeometry(cell_width=57, cell_height=38, canvas_width=1180, canvas_height=880)


@pytest.fixture
def tables(geometry):
    return build_tables(geometry)


@pytest.fixture
def registry():
    return PieceRegistry.for_all_colors()


@pytest.fixture
def surface():
    return RecordingSurface()
