"""Timed status effects: stuns and protective shields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hexcrawl.utils import Timer, TimerMode

STUNNED_COLOR = (2.0, 1.0, 1.0)
NORMAL_COLOR = (1.0, 1.0, 1.0)
SHIELD_COLOR = (2.0, 2.0, 2.0)
SHIELD_START_SCALE = 0.1
SHIELD_GROW_SPEED = 25.0
SHIELD_BLINK_SECONDS = 0.1
SHIELD_BLINK_FRACTION = 0.25
DEFAULT_STUN_SECONDS = 0.5


class GameLayer(Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    FRIEND = "friend"
    WALL = "wall"
    INTERACTABLE = "interactable"
    PROJECTILE = "projectile"
    SHIELD = "shield"


@dataclass(frozen=True)
class StunUpdate:
    """What a stun does to its target on one frame."""

    color: tuple[float, float, float] | None
    freeze_movement: bool
    expired: bool


class Stun:
    """Tints the target and stops its movement until the timer runs out."""

    def __init__(self, duration: float = DEFAULT_STUN_SECONDS) -> None:
        self.timer = Timer(duration, TimerMode.ONCE)

    def tick(self, delta: float) -> StunUpdate:
        self.timer.tick(delta)
        if self.timer.just_finished():
            return StunUpdate(NORMAL_COLOR, False, True)
        if not self.timer.finished():
            return StunUpdate(STUNNED_COLOR, True, False)
        return StunUpdate(None, False, False)


def shield_parameters(size: int) -> tuple[float, str]:
    """Collider radius and texture for a shield of the given pixel size."""
    if size == 64:
        return 32.0, "textures/shield-64.png"
    return 16.0, "textures/shield.png"


def grow_scale(scale: float, speed: float, delta: float) -> float:
    """Move ``scale`` towards 1 by the fraction ``speed * delta``."""
    return scale + (1.0 - scale) * (speed * delta)


class Shield:
    """A shield that grows in, blinks near the end and expires."""

    def __init__(self, duration: float, is_friendly: bool, size: int = 32) -> None:
        self.radius, self.texture = shield_parameters(size)
        self.is_friendly = is_friendly
        self.effect_timer = Timer(duration, TimerMode.ONCE)
        self.blink_timer = Timer(SHIELD_BLINK_SECONDS, TimerMode.REPEATING)
        self.color = SHIELD_COLOR
        self.alpha = 1.0
        self.scale = SHIELD_START_SCALE
        self.growing = True
        self.animation_speed = SHIELD_GROW_SPEED
        self.layer = GameLayer.SHIELD
        if is_friendly:
            self.side = GameLayer.FRIEND
            self.collides_with = (GameLayer.ENEMY, GameLayer.PROJECTILE)
        else:
            self.side = GameLayer.ENEMY
            self.collides_with = (GameLayer.FRIEND, GameLayer.PROJECTILE)

    def tick(self, delta: float) -> bool:
        """Advance the shield; True once it has expired."""
        if self.growing:
            self.scale = grow_scale(self.scale, self.animation_speed, delta)
            if self.scale == 1.0:
                self.growing = False

        self.effect_timer.tick(delta)
        if self.effect_timer.fraction_remaining() <= SHIELD_BLINK_FRACTION:
            self.blink_timer.tick(delta)
        if self.blink_timer.just_finished():
            if self.alpha == 0.0:
                self.alpha = 1.0
            elif self.alpha == 1.0:
                self.alpha = 0.0
        return self.effect_timer.finished()