import math

import pytest

from hexcrawl.player import (
    DeathOutcome,
    PlayerHealth,
    PlayerStats,
    facing_left,
    handle_death,
    movement_velocity,
    spawn_position,
)


def test_default_stats_match_source():
    stats = PlayerStats()
    assert stats.speed == 8000.0
    assert stats.damage == 20
    assert stats.element_damage_percent == [0.0] * 5


def test_bonused_damage_without_bonus_is_base_damage():
    stats = PlayerStats()
    assert stats.bonused_damage(0) == stats.damage


def test_bonused_damage_adds_blind_rage_after_scaling():
    plain = PlayerStats(element_damage_percent=[0.0, 0.5, 0.0, 0.0, 0.0])
    raging = PlayerStats(
        element_damage_percent=[0.0, 0.5, 0.0, 0.0, 0.0], blind_rage_bonus=7
    )
    assert raging.bonused_damage(1) == plain.bonused_damage(1) + 7
    assert plain.bonused_damage(1) > plain.bonused_damage(0)


def test_bonused_damage_rounds_half_up():
    stats = PlayerStats(damage=5, element_damage_percent=[0.5, 0.0, 0.0, 0.0, 0.0])
    assert stats.bonused_damage(0) == 8


def test_bonused_damage_rejects_unknown_element():
    with pytest.raises(IndexError):
        PlayerStats().bonused_damage(5)


def test_health_heal_is_capped_at_max():
    health = PlayerHealth(max=100, current=100)
    health.damage(25)
    assert health.current == 75
    health.heal(1000)
    assert health.current == health.max


def test_death_with_extra_life_revives():
    health = PlayerHealth(max=100, current=0, extra_lives=1)
    assert handle_death(health) is DeathOutcome.REVIVED
    assert health.extra_lives == 0
    assert health.current == health.max
    health.damage(health.max)
    assert health.is_dead
    assert handle_death(health) is DeathOutcome.GAME_OVER


def test_opposite_keys_cancel():
    assert movement_velocity({"a", "d"}, 100.0, 1.0) == (0.0, 0.0)


def test_single_key_moves_along_axis():
    vx, vy = movement_velocity({"W"}, 10.0, 2.0)
    assert vx == 0.0
    assert vy == pytest.approx(20.0)


def test_diagonal_speed_is_normalised():
    vx, vy = movement_velocity(["w", "d"], 8000.0, 0.1)
    assert math.hypot(vx, vy) == pytest.approx(800.0)
    assert vx == pytest.approx(vy)


def test_spawn_position():
    x, y, z = spawn_position(2)
    assert (x, y, z) == (32.0, 32.0, 1.0)


def test_facing_left():
    assert facing_left(10.0, 5.0) is True
    assert facing_left(5.0, 10.0) is False
    assert facing_left(5.0, 5.0) is False