"""Values shown by the health, experience and element bars."""

from __future__ import annotations

_EMPTY_SLOT = "textures/empty_slot.png"
_ELEMENT_SLOTS = {
    "fire": "textures/fire_slot.png",
    "water": "textures/water_slot.png",
    "earth": "textures/earth_slot.png",
    "air": "textures/air_slot.png",
}


def _percent(current: float, total: float) -> float:
    if total == 0:
        raise ValueError("the bar's total must not be zero")
    return current / total * 100.0


def health_bar_percent(current: int, maximum: int) -> float:
    """Width of the health bar as a percentage of its background."""
    return _percent(current, maximum)


def health_text(current: int, maximum: int) -> str:
    """The ``current/maximum`` label under the health bar."""
    return f"{current}/{maximum}"


def extra_lives_text(extra_lives: int) -> str:
    """Label beside the health bar; empty when there are no extra lives."""
    return f"x{extra_lives}" if extra_lives > 0 else ""


def experience_percent(current: int, to_level_up: int) -> float:
    """Width of the experience bar as a percentage of its background."""
    return _percent(current, to_level_up)


def element_slot_texture(element) -> str:
    """Texture of an element bar slot filled with ``element``.

    Anything that is not one of the four casting elements shows an empty slot.
    """
    name = getattr(element, "name", element)
    if not isinstance(name, str):
        return _EMPTY_SLOT
    return _ELEMENT_SLOTS.get(name.lower(), _EMPTY_SLOT)


def new_slot_indices(current_max: int, level: int) -> list[int]:
    """Indices of the slots to add when the player reaches ``level``."""
    return list(range(current_max, level)) if current_max < level else []