"""Persistent record of the spells, items and mobs the player has seen."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field

DEFAULT_SAVE_PATH = "assets/save.json"
STARTING_SPELLS = ("fire", "water", "earth", "air")
_FIELDS = ("seen_items", "seen_mobs", "seen_spells")


def _string_list(data: dict, key: str) -> list[str]:
    if key not in data:
        raise ValueError(f"save is missing field {key!r}")
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(entry, str) for entry in value):
        raise ValueError(f"save field {key!r} must be a list of strings")
    return list(value)


@dataclass
class Save:
    """What the almanac shows as discovered."""

    seen_items: list[str] = field(default_factory=list)
    seen_mobs: list[str] = field(default_factory=list)
    seen_spells: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | os.PathLike = DEFAULT_SAVE_PATH) -> Save:
        """Read a save from a JSON file.

        Raises FileNotFoundError when the file is missing and ValueError when
        its contents are not a valid save.
        """
        with open(path, encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as error:
                raise ValueError(f"save file is not valid JSON: {error}") from error
        if not isinstance(data, dict):
            raise ValueError("save file must hold a JSON object")
        return cls(**{key: _string_list(data, key) for key in _FIELDS})

    def write(self, path: str | os.PathLike = DEFAULT_SAVE_PATH) -> None:
        """Write the save as compact JSON, replacing any existing file."""
        text = json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"))
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def reset(self) -> None:
        """Forget everything except the starting spells."""
        self.seen_spells = list(STARTING_SPELLS)
        self.seen_items = []
        self.seen_mobs = []