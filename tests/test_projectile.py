import math
import random

import pytest

from hexcrawl.effects import GameLayer
from hexcrawl.projectile import (
    Projectile,
    Radial,
    Straight,
    collision_layers,
    impact_burst,
    initial_angle,
)


def test_default_projectile_matches_source():
    projectile = Projectile()
    assert projectile.speed == 100.0
    assert projectile.damage == 100
    assert isinstance(projectile.trajectory, Straight)


def test_straight_step_moves_speed_times_delta():
    projectile = Projectile(direction=(0.6, 0.8), speed=50.0)
    (x, y, z), rotation = projectile.step((1.0, 2.0, 3.0), 0.2)
    assert math.hypot(x - 1.0, y - 2.0) == pytest.approx(50.0 * 0.2)
    assert z == 3.0
    assert rotation is None


def test_radial_step_stays_on_circle():
    trajectory = Radial(radius=5.0, pivot=(10.0, -3.0), counter_clockwise=True)
    projectile = Projectile(trajectory=trajectory, angle=0.0, speed=2.0)
    (x, y, z), rotation = projectile.step((15.0, -3.0, 0.0), 0.1)
    assert math.hypot(x - 10.0, y + 3.0) == pytest.approx(5.0)
    assert projectile.angle == pytest.approx(2.0 * 0.1)
    assert z == 0.0
    assert rotation is not None and rotation > 0


def test_radial_clockwise_decreases_angle():
    trajectory = Radial(radius=1.0, pivot=(0.0, 0.0), counter_clockwise=False)
    projectile = Projectile(trajectory=trajectory, angle=1.0, speed=3.0)
    projectile.step((0.0, 0.0, 0.0), 0.5)
    assert projectile.angle == pytest.approx(1.0 - 3.0 * 0.5)


def test_radial_does_not_move_when_time_stands_still():
    trajectory = Radial(radius=1.0, pivot=(0.0, 0.0))
    projectile = Projectile(trajectory=trajectory, angle=0.3)
    position, rotation = projectile.step((4.0, 5.0, 6.0), 0.0)
    assert position == (4.0, 5.0, 6.0)
    assert rotation is None
    assert projectile.angle == 0.3


def test_initial_angle_straight_keeps_aim():
    assert initial_angle((3.0, 4.0, 0.0), Straight(), 1.25) == 1.25


def test_initial_angle_radial_points_away_from_pivot():
    trajectory = Radial(radius=5.0, pivot=(0.0, 0.0))
    assert initial_angle((0.0, 5.0, 0.0), trajectory, 0.0) == pytest.approx(math.pi / 2)


def test_initial_angle_radial_on_pivot_is_an_error():
    with pytest.raises(ValueError):
        initial_angle((1.0, 1.0, 0.0), Radial(radius=1.0, pivot=(1.0, 1.0)), 0.0)


def test_collision_layers_walls():
    own, solid = collision_layers(False)
    _, ghost = collision_layers(True)
    assert own is GameLayer.PROJECTILE
    assert GameLayer.WALL in solid
    assert GameLayer.WALL not in ghost
    assert set(solid) - set(ghost) == {GameLayer.WALL}


def test_impact_burst_flies_back():
    rng = random.Random(7)
    for _ in range(50):
        burst = impact_burst((1.0, -2.0), rng)
        assert burst.direction == (-1.0, 2.0)
        assert 8.0 <= burst.distance < 12.0
    assert burst.amount == 3
    assert burst.spread == pytest.approx(math.pi / 3)
    assert burst.rotate is False