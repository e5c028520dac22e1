"""Player statistics, health, movement and death handling."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from enum import Enum

ELEMENT_COUNT = 5
DEFAULT_SPEED = 8000.0
DEFAULT_DAMAGE = 20
DEFAULT_MAX_HEALTH = 100
DEBUG_DAMAGE = 25
SPAWN_CELLS = 16

_KEY_DIRECTIONS = {
    "a": (-1.0, 0.0),
    "d": (1.0, 0.0),
    "s": (0.0, -1.0),
    "w": (0.0, 1.0),
}


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class PlayerStats:
    """Modifiers that items and level-ups apply to the player."""

    speed: float = DEFAULT_SPEED
    damage: int = DEFAULT_DAMAGE
    invincibility_time: float = 1.0
    projectile_deflect_chance: float = 0.0
    vampirism: int = 0
    health_regen: int = 0
    spell_cast_hp_fee: int = 0
    blind_rage_bonus: int = 0
    element_damage_percent: list[float] = field(
        default_factory=lambda: [0.0] * ELEMENT_COUNT
    )

    def bonused_damage(self, element) -> int:
        """Damage dealt with ``element`` (an element index) after all bonuses."""
        index = operator.index(element)
        if not 0 <= index < len(self.element_damage_percent):
            raise IndexError(f"unknown element index: {index}")
        scaled = self.damage * (1.0 + self.element_damage_percent[index])
        return _round_half_away(scaled) + self.blind_rage_bonus


@dataclass
class PlayerHealth:
    """The player's hit points and spare lives."""

    max: int = DEFAULT_MAX_HEALTH
    current: int = DEFAULT_MAX_HEALTH
    extra_lives: int = 0

    def damage(self, amount: int) -> None:
        self.current -= amount

    def heal(self, amount: int) -> None:
        self.current = min(self.current + amount, self.max)

    @property
    def is_dead(self) -> bool:
        return self.current <= 0


class DeathOutcome(Enum):
    """What happens when the player's health runs out."""

    REVIVED = "revived"
    GAME_OVER = "game_over"


def handle_death(health: PlayerHealth) -> DeathOutcome:
    """Spend an extra life to restore full health, or end the game."""
    if health.extra_lives > 0:
        health.extra_lives -= 1
        health.heal(health.max)
        return DeathOutcome.REVIVED
    return DeathOutcome.GAME_OVER


def movement_velocity(pressed, speed: float, delta: float) -> tuple[float, float]:
    """Velocity from the held WASD keys, normalised so diagonals are not faster."""
    keys = {key.lower() for key in pressed}
    x = sum(dx for key, (dx, _) in _KEY_DIRECTIONS.items() if key in keys)
    y = sum(dy for key, (_, dy) in _KEY_DIRECTIONS.items() if key in keys)
    length = math.hypot(x, y)
    if length == 0:
        return (0.0, 0.0)
    factor = speed * delta / length
    return (x * factor, y * factor)


def spawn_position(room_size: int) -> tuple[float, float, float]:
    """Where the player appears at the start of a level."""
    coordinate = float(room_size * SPAWN_CELLS)
    return (coordinate, coordinate, 1.0)


def facing_left(player_x: float, mouse_x: float) -> bool:
    """True when the sprite should be flipped to face the mouse."""
    return player_x - mouse_x > 0