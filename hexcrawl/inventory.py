"""Counts of the items the player has picked up."""

from __future__ import annotations

from collections.abc import Hashable, Iterator


class ItemInventory:
    """How many of each item type the player carries, in pick-up order."""

    def __init__(self) -> None:
        self._counts: dict[Hashable, int] = {}

    def add(self, item: Hashable) -> None:
        """Record one more ``item``."""
        self._counts[item] = self._counts.get(item, 0) + 1

    def remove(self, item: Hashable) -> None:
        """Take one ``item`` away, dropping it entirely once none are left.

        Raises KeyError when the inventory holds no such item.
        """
        if item not in self._counts:
            raise KeyError(item)
        self._counts[item] -= 1
        if self._counts[item] <= 0:
            del self._counts[item]

    def amount_of_item(self, item: Hashable) -> int:
        """How many of ``item`` are held; 0 when there are none."""
        return self._counts.get(item, 0)

    def __iter__(self) -> Iterator[tuple[Hashable, int]]:
        """Yield ``(item, count)`` pairs."""
        return iter(list(self._counts.items()))

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, item: object) -> bool:
        return item in self._counts