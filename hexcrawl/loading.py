"""Loading screen with animated mob portraits."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexcrawl.utils import FrameAnimation, Timer, TimerMode

LOADING_MOBS = (
    ("textures/mobs/mossling.png", 4, 12),
    ("textures/mobs/fire_mage.png", 2, 3),
    ("textures/mobs/water_mage.png", 2, 3),
)
PORTRAIT_SCALE = 0.15
LOADING_TIMER_SECONDS = 3.0


def portrait_size(window_width: float) -> int:
    """Side length in pixels of a portrait for the given window width."""
    return math.floor(window_width * PORTRAIT_SCALE)


@dataclass
class Portrait:
    texture: str
    animation: FrameAnimation


class LoadingScreen:
    """A hidden-by-default overlay that animates mob portraits while loading."""

    def __init__(self) -> None:
        self.visible = False
        self.portraits = [
            Portrait(texture, FrameAnimation(0, frames - 1, fps))
            for texture, frames, fps in LOADING_MOBS
        ]
        self.timer = Timer(LOADING_TIMER_SECONDS, TimerMode.REPEATING)
        self.timer.pause()

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def tick(self, delta: float) -> list[int]:
        """Advance every portrait and return their frame indices."""
        return [portrait.animation.advance(delta) for portrait in self.portraits]