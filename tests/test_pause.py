from hexcrawl.pause import PauseClock


def test_new_clock_runs_and_hides_overlay():
    clock = PauseClock()
    assert clock.overlay_visible() is False
    assert (clock.virtual_paused, clock.physics_paused) == (False, False)


def test_toggle_pauses_both_clocks():
    clock = PauseClock()
    assert clock.toggle() is True
    assert (clock.virtual_paused, clock.physics_paused) == (True, True)
    assert clock.overlay_visible() is True


def test_toggle_twice_resumes():
    clock = PauseClock()
    clock.toggle()
    assert clock.toggle() is False
    assert (clock.virtual_paused, clock.physics_paused) == (False, False)
    assert clock.overlay_visible() is False


def test_toggle_with_only_physics_paused_unpauses_both():
    clock = PauseClock(physics_paused=True)
    assert clock.toggle() is False
    assert clock.physics_paused is False
    assert clock.virtual_paused is False


def test_toggle_with_only_virtual_paused_unpauses_both():
    clock = PauseClock(virtual_paused=True)
    assert clock.toggle() is False
    assert clock.physics_paused is False


def test_overlay_follows_virtual_clock_only():
    assert PauseClock(physics_paused=True).overlay_visible() is False
    assert PauseClock(virtual_paused=True).overlay_visible() is True


def test_pause_and_unpause_are_idempotent():
    clock = PauseClock()
    clock.pause()
    clock.pause()
    assert clock.overlay_visible() is True
    clock.unpause()
    clock.unpause()
    assert (clock.virtual_paused, clock.physics_paused) == (False, False)