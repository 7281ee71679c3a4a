"""Discovery records shared by maze generation and path search.

Records live in a flat arena: each one stores its coordinate and the arena
index of the record it was reached from. A parent is always appended before
its children, so every chain ends at a root after at most ``len(arena)`` hops.
"""

from __future__ import annotations

import random
from typing import Iterator, List, Optional

from .cells import Coordinate


class DiscoveryArena:
    def __init__(self) -> None:
        self._coords: List[Coordinate] = []
        self._parents: List[Optional[int]] = []

    def __len__(self) -> int:
        return len(self._coords)

    def add(self, coord: Coordinate, parent: Optional[int] = None) -> int:
        if parent is not None and not 0 <= parent < len(self._coords):
            raise IndexError(f"Unknown parent record {parent}")
        self._coords.append(coord)
        self._parents.append(parent)
        return len(self._coords) - 1

    def coord(self, index: int) -> Coordinate:
        return self._coords[index]

    def parent(self, index: int) -> Optional[int]:
        return self._parents[index]

    def parent_coord(self, index: int) -> Optional[Coordinate]:
        parent = self._parents[index]
        return None if parent is None else self._coords[parent]

    def chain(self, index: int) -> Iterator[Coordinate]:
        """Yield coordinates from ``index`` back to its root, inclusive."""

        current: Optional[int] = index
        for _ in range(len(self._coords)):
            if current is None:
                return
            yield self._coords[current]
            current = self._parents[current]


class Frontier:
    """Unordered bag of arena indices with uniform random removal."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, index: int) -> None:
        self._items.append(index)

    def pop_random(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty frontier")
        pick = self._rng.randrange(len(self._items))
        items = self._items
        items[pick], items[-1] = items[-1], items[pick]
        return items.pop()


__all__ = ["DiscoveryArena", "Frontier"]
