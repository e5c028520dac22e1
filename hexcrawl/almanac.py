"""Entries shown on the almanac pages for spells, items and mobs."""

from __future__ import annotations

from dataclasses import dataclass

from hexcrawl.save import Save

UNKNOWN_TEXT = "???"
SEEN_TINT = (1.0, 1.0, 1.0)
UNSEEN_TINT = (0.0, 0.0, 0.0)
ITEM_TEXTURE_DIR = "textures/items/"
MOB_PORTRAIT_DIR = "textures/ui/mob_portraits/"

_RECIPE_TEXTURES = {
    "fire": "fire_slot.png",
    "water": "water_slot.png",
    "earth": "earth_slot.png",
    "air": "air_slot.png",
    "etc": "ui/etc.png",
    "lower": "ui/lower.png",
    "greater": "ui/greater.png",
    "equals": "ui/equals.png",
}


@dataclass(frozen=True)
class AlmanacEntry:
    """One card or row of the almanac.

    Undiscovered entries hide their title and description and show their
    icons as black silhouettes.
    """

    title: str
    icons: tuple[str, ...]
    seen: bool
    description: str | None = None

    @property
    def tint(self) -> tuple[float, float, float]:
        return SEEN_TINT if self.seen else UNSEEN_TINT

    @property
    def text(self) -> str:
        """The label shown on the entry."""
        if self.description is None:
            return self.title
        return f"{self.title}\n\n{self.description}"


def _text(entry, key: str) -> str:
    try:
        value = entry[key]
    except (KeyError, TypeError):
        raise ValueError(f"almanac entry is missing field {key!r}") from None
    if not isinstance(value, str):
        raise ValueError(f"almanac field {key!r} must be a string")
    return value


def recipe_texture(element: str) -> str:
    """Texture of one symbol in a spell recipe; unknown symbols have no image."""
    if not isinstance(element, str):
        raise ValueError(f"recipe symbol must be a string: {element!r}")
    return "textures/" + _RECIPE_TEXTURES.get(element, "")


def spell_entries(spells, save: Save) -> list[AlmanacEntry]:
    """Rows of the spell page, one per spell, with its recipe as icons."""
    entries = []
    for spell in spells:
        name = _text(spell, "name")
        try:
            recipe = spell["recipe"]
        except (KeyError, TypeError):
            raise ValueError("almanac entry is missing field 'recipe'") from None
        if not isinstance(recipe, list):
            raise ValueError("almanac field 'recipe' must be a list")
        seen = _text(spell, "tag") in save.seen_spells
        entries.append(
            AlmanacEntry(
                title=name if seen else UNKNOWN_TEXT,
                icons=tuple(recipe_texture(symbol) for symbol in recipe),
                seen=seen,
            )
        )
    return entries


def _cards(records, texture_dir: str, seen_names) -> list[AlmanacEntry]:
    entries = []
    for record in records:
        name = _text(record, "name")
        description = _text(record, "description")
        texture_name = _text(record, "texture_name")
        seen = texture_name in seen_names
        entries.append(
            AlmanacEntry(
                title=name if seen else UNKNOWN_TEXT,
                icons=(texture_dir + texture_name,),
                seen=seen,
                description=description if seen else UNKNOWN_TEXT,
            )
        )
    return entries


def item_entries(items, save: Save) -> list[AlmanacEntry]:
    """Cards of the item page; an item counts as seen by its texture name."""
    return _cards(items, ITEM_TEXTURE_DIR, save.seen_items)


def mob_entries(mobs, save: Save) -> list[AlmanacEntry]:
    """Cards of the mob page; a mob counts as seen by its texture name."""
    return _cards(mobs, MOB_PORTRAIT_DIR, save.seen_mobs)