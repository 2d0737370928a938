"""Time based motion of pieces between two board coordinates."""

from __future__ import annotations

import math
from collections import namedtuple
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Tuple

Point = Tuple[float, float]

MotionSample = namedtuple("MotionSample", ["x", "y", "hop"])

DEFAULT_DURATION = 0.4
DEFAULT_HOP = 15.0


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def _lerp(a: float, b: float, e: float) -> float:
    # exact at both ends: a at e == 0, b at e == 1
    return a * (1 - e) + b * e


def interpolate(start: Point, end: Point, t: float, hop_amplitude: float = DEFAULT_HOP) -> MotionSample:
    """Eased position between ``start`` and ``end`` at progress ``t``.

    ``hop`` is a cosmetic lift to subtract from the drawn y; it is zero at
    both ends and is never part of the piece position.
    """
    t = min(max(t, 0.0), 1.0)
    e = ease_in_out_cubic(t)
    hop = 0.0 if t in (0.0, 1.0) else math.sin(t * math.pi) * hop_amplitude
    return MotionSample(_lerp(start[0], end[0], e), _lerp(start[1], end[1], e), hop)


@dataclass(frozen=True)
class Animation:
    start: Point
    end: Point
    started_at: float
    duration: float
    token: int
    hop_amplitude: float = DEFAULT_HOP

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.started_at) / self.duration, 0.0), 1.0)


class Animator:
    """Per-piece animations, superseded through a generation token.

    Starting a transition for a key that is still moving bumps the key's
    generation and starts from where the piece is drawn right now, so an
    older animation can never write a frame after a newer one was started.
    """

    def __init__(self, duration: float = DEFAULT_DURATION, hop_amplitude: float = DEFAULT_HOP):
        self.duration = duration
        self.hop_amplitude = hop_amplitude
        self._generation: Dict[Hashable, int] = {}
        self._running: Dict[Hashable, Animation] = {}

    def start(
        self, key: Hashable, start: Point, end: Point, now: float, hop_amplitude: Optional[float] = None
    ) -> Animation:
        current = self.sample(key, now)
        if current is not None:
            start = (current.x, current.y)
        token = self._generation.get(key, 0) + 1
        self._generation[key] = token
        hop = self.hop_amplitude if hop_amplitude is None else hop_amplitude
        animation = Animation(start, end, now, self.duration, token, hop)
        self._running[key] = animation
        return animation

    def is_current(self, key: Hashable, animation: Animation) -> bool:
        return self._generation.get(key) == animation.token

    def running(self, key: Hashable) -> Optional[Animation]:
        return self._running.get(key)

    def sample(self, key: Hashable, now: float) -> Optional[MotionSample]:
        animation = self._running.get(key)
        if animation is None:
            return None
        if not self.is_current(key, animation):
            del self._running[key]
            return None
        t = animation.progress(now)
        sample = interpolate(animation.start, animation.end, t, animation.hop_amplitude)
        if t >= 1.0:
            del self._running[key]
        return sample

    def step(self, key: Hashable, animation: Animation, now: float) -> Optional[MotionSample]:
        """Continuation of one animation; ``None`` once it has been superseded."""
        if not self.is_current(key, animation):
            return None
        return self.sample(key, now)

    def advance(self, now: float) -> Dict[Hashable, MotionSample]:
        """Sample every running animation once for this frame."""
        frame = {}
        for key, animation in list(self._running.items()):
            sample = self.step(key, animation, now)
            if sample is not None:
                frame[key] = sample
        return frame

    def cancel(self, key: Hashable) -> None:
        if self._running.pop(key, None) is not None:
            self._generation[key] = self._generation.get(key, 0) + 1

    def cancel_all(self) -> None:
        for key in list(self._running):
            self.cancel(key)

    @property
    def active(self) -> bool:
        return bool(self._running)

    def __len__(self):
        return len(self._running)
