"""Projectile trajectories, collision layers and impact particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from hexcrawl.effects import GameLayer

PROJECTILE_LIFETIME = 5.0
BURST_AMOUNT = 3
BURST_SPEED = 10.0
BURST_SPREAD = math.pi / 3
BURST_MIN_DISTANCE = 8.0
BURST_MAX_DISTANCE = 12.0

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Straight:
    """Fly along the projectile's direction."""


@dataclass(frozen=True)
class Radial:
    """Orbit ``pivot`` at ``radius``."""

    radius: float
    pivot: Vec2
    counter_clockwise: bool = False


def _normalize(x: float, y: float) -> Vec2 | None:
    length = math.hypot(x, y)
    if length == 0 or not math.isfinite(length):
        return None
    return (x / length, y / length)


@dataclass
class Projectile:
    trajectory: Straight | Radial = field(default_factory=Straight)
    direction: Vec2 = (1.0, 0.0)
    angle: float = 0.0
    speed: float = 100.0
    damage: int = 100
    element: str = "air"

    def step(self, position: Vec3, delta: float) -> tuple[Vec3, float | None]:
        """Advance by ``delta`` seconds; return the new position and new rotation.

        The rotation is None when it does not change.
        """
        trajectory = self.trajectory
        if isinstance(trajectory, Straight):
            distance = self.speed * delta
            return (
                (
                    position[0] + self.direction[0] * distance,
                    position[1] + self.direction[1] * distance,
                    position[2],
                ),
                None,
            )
        if delta <= 0:
            return (tuple(position), None)
        turn = delta * self.speed
        self.angle += turn if trajectory.counter_clockwise else -turn
        next_x = trajectory.pivot[0] + trajectory.radius * math.cos(self.angle)
        next_y = trajectory.pivot[1] + trajectory.radius * math.sin(self.angle)
        heading = _normalize(next_x - position[0], next_y - position[1])
        rotation = None if heading is None else math.atan2(heading[1], heading[0])
        return ((next_x, next_y, 0.0), rotation)


def initial_angle(translation, trajectory: Straight | Radial, angle: float) -> float:
    """Starting angle: the aim for straight shots, the bearing from the pivot for orbits."""
    if isinstance(trajectory, Straight):
        return angle
    offset = _normalize(translation[0] - trajectory.pivot[0], translation[1] - trajectory.pivot[1])
    if offset is None:
        raise ValueError("a radial projectile cannot start on its pivot")
    return math.atan2(offset[1], offset[0])


def collision_layers(can_go_through_walls: bool) -> tuple[GameLayer, tuple[GameLayer, ...]]:
    """The projectile's own layer and the layers it collides with."""
    targets = (
        GameLayer.ENEMY,
        GameLayer.PLAYER,
        GameLayer.FRIEND,
        GameLayer.INTERACTABLE,
        GameLayer.SHIELD,
    )
    if not can_go_through_walls:
        targets += (GameLayer.WALL,)
    return GameLayer.PROJECTILE, targets


@dataclass(frozen=True)
class ParticleBurst:
    """Particles thrown back from the point of impact."""

    direction: Vec2
    distance: float
    spread: float = BURST_SPREAD
    amount: int = BURST_AMOUNT
    speed: float = BURST_SPEED
    rotate: bool = False


def impact_burst(direction: Vec2, rng: random.Random | None = None) -> ParticleBurst:
    """The burst spawned when a projectile hits a wall or a shield."""
    source = rng if rng is not None else random
    distance = BURST_MIN_DISTANCE + source.random() * (BURST_MAX_DISTANCE - BURST_MIN_DISTANCE)
    return ParticleBurst(direction=(-direction[0], -direction[1]), distance=distance)