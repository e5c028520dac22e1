import math

import pytest

from hexcrawl.wand import Wand


def test_no_player_hides_wand():
    wand = Wand()
    wand.follow(None, (10.0, 10.0), 0.1)
    assert wand.visible is False


def test_player_makes_wand_visible_again():
    wand = Wand()
    wand.follow(None, (10.0, 10.0), 0.1)
    wand.follow((0.0, 0.0, 0.0), (100.0, 0.0), 0.01)
    assert wand.visible is True


def test_mouse_on_player_keeps_wand_still():
    wand = Wand()
    wand.position = (50.0, 50.0, 1.0)
    wand.follow((10.0, 10.0, 0.0), (11.0, 11.0), 0.5)
    assert wand.position == (50.0, 50.0, 1.0)
    assert wand.rotation == 0.0


def test_full_step_reaches_target_and_faces_mouse():
    wand = Wand()
    wand.follow((0.0, 0.0, 0.0), (0.0, 100.0), 1.0 / 12.0)
    x, y, z = wand.position
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(12.0)
    assert z == pytest.approx(1.0)
    assert wand.rotation == pytest.approx(math.pi / 2)


def test_partial_step_gets_closer():
    wand = Wand()
    wand.position = (-40.0, 0.0, 0.0)
    player = (0.0, 0.0, 0.0)
    mouse = (100.0, 0.0)
    before = math.dist(wand.position[:2], (12.0, 0.0))
    wand.follow(player, mouse, 0.02)
    after = math.dist(wand.position[:2], (12.0, 0.0))
    assert after < before


def test_rotation_turns_part_of_the_way():
    wand = Wand()
    wand.position = (0.0, 12.0, 1.0)
    wand.follow((0.0, 0.0, 0.0), (0.0, 100.0), 0.02)
    assert 0.0 < wand.rotation < math.pi / 2