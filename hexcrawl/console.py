"""Parsing of debug console commands."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ConsoleError(ValueError):
    """A console command that is missing arguments or has malformed ones."""


@dataclass(frozen=True)
class SpawnItem:
    item_id: int


@dataclass(frozen=True)
class SpawnExpTank:
    orbs: int


@dataclass(frozen=True)
class SpawnHealthTank:
    hp: int


@dataclass(frozen=True)
class GrantInvincibility:
    duration: float


@dataclass(frozen=True)
class GoTo:
    chapter: int
    level: int


def _argument(words: list[str], index: int) -> str:
    try:
        return words[index]
    except IndexError:
        raise ConsoleError(f"command {' '.join(words)!r} is missing an argument") from None


def _integer(text: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not pattern.fullmatch(text):
        raise ConsoleError(f"not an integer: {text!r}")
    value = int(text)
    if not low <= value <= high:
        raise ConsoleError(f"out of range: {text!r}")
    return value


def _unsigned(text: str, high: int) -> int:
    return _integer(text, _UNSIGNED, 0, high)


def _real(text: str) -> float:
    if "_" in text:
        raise ConsoleError(f"not a number: {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ConsoleError(f"not a number: {text!r}") from None


def parse_command(text: str):
    """Turn a line typed into the console into a command.

    Returns None for commands that are unknown or do nothing. Raises
    ConsoleError when the line is empty, an argument is missing or an
    argument does not parse.
    """
    words = text.split()
    if not words:
        raise ConsoleError("empty command")

    name = words[0]
    if name == "spawn":
        kind = _argument(words, 1)
        if kind == "item":
            return SpawnItem(_unsigned(_argument(words, 2), _USIZE_MAX))
        if kind == "exp":
            return SpawnExpTank(_unsigned(_argument(words, 2), _U32_MAX))
        if kind == "hp":
            return SpawnHealthTank(_integer(_argument(words, 2), _SIGNED, _I32_MIN, _I32_MAX))
        return None
    if name == "inv":
        return GrantInvincibility(_real(_argument(words, 1)))
    if name == "goto":
        chapter = _unsigned(_argument(words, 1), _U8_MAX)
        level = _unsigned(_argument(words, 2), _U8_MAX)
        return GoTo(chapter, level)
    return None