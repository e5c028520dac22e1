import pytest

from hexcrawl.loading import LoadingScreen, portrait_size


def test_screen_starts_hidden_and_toggles():
    screen = LoadingScreen()
    assert screen.visible is False
    screen.show()
    assert screen.visible is True
    screen.hide()
    assert screen.visible is False


def test_portrait_textures():
    screen = LoadingScreen()
    assert [p.texture for p in screen.portraits] == [
        "textures/mobs/mossling.png",
        "textures/mobs/fire_mage.png",
        "textures/mobs/water_mage.png",
    ]


def test_portraits_start_on_first_frame():
    screen = LoadingScreen()
    assert all(p.animation.index == p.animation.first for p in screen.portraits)


def test_tick_advances_every_portrait():
    screen = LoadingScreen()
    indices = screen.tick(1.0)
    assert indices == [p.animation.first + 1 for p in screen.portraits]


def test_tick_never_leaves_frame_range():
    screen = LoadingScreen()
    for _ in range(40):
        screen.tick(0.4)
        for portrait in screen.portraits:
            assert portrait.animation.first <= portrait.animation.index <= portrait.animation.last


def test_debug_timer_is_paused():
    screen = LoadingScreen()
    screen.timer.tick(10.0)
    assert not screen.timer.finished()


def test_portrait_size_value():
    assert portrait_size(1000) == 150


@pytest.mark.parametrize("width", [640, 801, 1280, 1921.5])
def test_portrait_size_is_floor_of_scaled_width(width):
    size = portrait_size(width)
    assert isinstance(size, int)
    assert size <= width * 0.15 < size + 1