"""Pausing game and physics time together, and the pause overlay."""

from __future__ import annotations

from dataclasses import dataclass

PAUSE_MESSAGE = "да мам, я не играю..."
PAUSE_KEY = "escape"


@dataclass
class PauseClock:
    """Pause state of the virtual clock and the physics clock."""

    virtual_paused: bool = False
    physics_paused: bool = False

    def toggle(self) -> bool:
        """Flip the pause; if either clock was paused both resume.

        Returns True when the game is paused afterwards.
        """
        if self.virtual_paused or self.physics_paused:
            self.unpause()
        else:
            self.pause()
        return self.virtual_paused

    def pause(self) -> None:
        self.virtual_paused = True
        self.physics_paused = True

    def unpause(self) -> None:
        self.virtual_paused = False
        self.physics_paused = False

    def overlay_visible(self) -> bool:
        """The pause overlay shows while the virtual clock is paused."""
        return self.virtual_paused