"""Timers, entity lifetimes, sprite frame animation and small random helpers."""

from __future__ import annotations

import bisect
import itertools
import math
import random
from enum import Enum

_MAX_TIMES_FINISHED = 2**32 - 1


class TimerMode(Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A countdown measured in seconds and advanced by frame deltas."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative: {duration}")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self.paused = False
        self._finished = False
        self._times_finished = 0

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if self.paused:
            self._times_finished = 0
            if self.mode is TimerMode.REPEATING:
                self._finished = False
            return self
        if self.mode is not TimerMode.REPEATING and self._finished:
            self._times_finished = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration == 0:
                self._times_finished = _MAX_TIMES_FINISHED
                self.elapsed = 0.0
            else:
                times = int(self.elapsed // self.duration)
                self._times_finished = times
                self.elapsed = max(0.0, self.elapsed - times * self.duration)
        else:
            self._times_finished = 1
            self.elapsed = self.duration
        return self

    def finished(self) -> bool:
        return self._finished

    def just_finished(self) -> bool:
        """True only on the tick in which the timer ran out."""
        return self._times_finished > 0

    def fraction_remaining(self) -> float:
        fraction = 1.0 if self.duration == 0 else self.elapsed / self.duration
        return 1.0 - fraction

    def pause(self) -> None:
        self.paused = True

    def unpause(self) -> None:
        self.paused = False

    def reset(self) -> None:
        self.elapsed = 0.0
        self._finished = False
        self._times_finished = 0


class Lifetime:
    """Counts down an entity's remaining life."""

    def __init__(self, duration: float) -> None:
        self.timer = Timer(duration, TimerMode.ONCE)

    def tick(self, delta: float) -> bool:
        """Advance the lifetime; True on the tick the entity should be removed."""
        self.timer.tick(delta)
        return self.timer.just_finished()


class FrameAnimation:
    """Steps a sprite-sheet index from ``first`` to ``last`` at ``fps`` frames a second."""

    def __init__(self, first: int, last: int, fps: float) -> None:
        if fps <= 0:
            raise ValueError(f"frames per second must be positive: {fps}")
        self.first = first
        self.last = last
        self.fps = fps
        self.index = first
        self.timer = self._frame_timer()

    def _frame_timer(self) -> Timer:
        return Timer(1.0 / self.fps, TimerMode.ONCE)

    def advance(self, delta: float) -> int:
        """Advance by ``delta`` seconds and return the current frame index.

        After the last frame the index goes back to the first one and the
        animation stops until the frame timer is replaced.
        """
        self.timer.tick(delta)
        if self.timer.just_finished():
            if self.index == self.last:
                self.index = self.first
            else:
                self.index += 1
                self.timer = self._frame_timer()
        return self.index

    def reset(self) -> None:
        """Show the first frame again."""
        self.index = self.first


def pulsate_scale(elapsed: float) -> float:
    """Scale factor of a pulsating sprite after ``elapsed`` seconds."""
    xy = math.sin(elapsed) * math.sin(elapsed)
    if xy <= 0.5 and xy + 0.05 <= 1.0:
        xy = 1.0 - xy + 0.05
    return xy


def random_weighted_index(weights, rng: random.Random | None = None) -> int:
    """Pick an index with probability proportional to its weight."""
    weights = list(weights)
    if not weights:
        raise ValueError("no weights to choose from")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    total = sum(weights)
    if total <= 0:
        raise ValueError("at least one weight must be positive")
    source = rng if rng is not None else random
    cumulative = list(itertools.accumulate(weights))
    return bisect.bisect_right(cumulative, source.random() * total)