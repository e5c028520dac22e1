"""The wand that floats beside the player and points at the mouse."""

from __future__ import annotations

import math

FOLLOW_DISTANCE = 12.0
FOLLOW_RATE = 12.0
DEAD_ZONE = 4.0


def _z_rotation(angle: float) -> tuple[float, float]:
    return (math.sin(angle / 2), math.cos(angle / 2))


def _lerp_rotation(start: float, end: float, t: float) -> float:
    """Normalised linear interpolation of two rotations about the z axis."""
    z0, w0 = _z_rotation(start)
    z1, w1 = _z_rotation(end)
    if z0 * z1 + w0 * w1 < 0:
        z1, w1 = -z1, -w1
    z = z0 + (z1 - z0) * t
    w = w0 + (w1 - w0) * t
    if math.hypot(z, w) == 0:
        return start
    return 2 * math.atan2(z, w)


class Wand:
    """Position, rotation angle and visibility of the player's wand."""

    def __init__(self) -> None:
        self.position: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.rotation = 0.0
        self.visible = True

    def follow(self, player, mouse, delta: float) -> None:
        """Ease towards the player on the mouse's side and turn towards the mouse.

        ``player`` is the player's position, or None when there is no player
        to follow, in which case the wand is hidden.
        """
        if player is None:
            self.visible = False
            return
        self.visible = True

        px, py, pz = player
        mx, my = mouse
        wx, wy, wz = self.position
        if math.dist((px, py), (mx, my)) <= DEAD_ZONE or math.dist((wx, wy), (mx, my)) <= DEAD_ZONE:
            return

        dx, dy = mx - wx, my - wy
        length = math.hypot(dx, dy)
        if length > 0 and math.isfinite(length):
            dx, dy = dx / length * FOLLOW_DISTANCE, dy / length * FOLLOW_DISTANCE
        else:
            dx, dy = 0.0, 0.0
        target = (px + dx, py + dy, pz + 1.0)

        t = FOLLOW_RATE * delta
        self.position = tuple(a + (b - a) * t for a, b in zip(self.position, target))

        angle = math.atan2(my - self.position[1], mx - self.position[0])
        self.rotation = _lerp_rotation(self.rotation, angle, t)