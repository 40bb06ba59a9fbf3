"""Shared grid types for the core and domain layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

Faction = Literal["elf", "goblin"]

FACTIONS: Tuple[Faction, ...] = ("elf", "goblin")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A grid cell. Row index is ``y``, column index is ``x``, origin top-left.

    Coordinates deliberately define no ordering of their own: every sort that
    affects a decision passes :func:`reading_order` as its key.
    """

    x: int
    y: int

    def neighbours(self) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
        """Return the four edge-sharing cells in reading order (up, left, right, down)."""
        return (
            Coordinate(self.x, self.y - 1),
            Coordinate(self.x - 1, self.y),
            Coordinate(self.x + 1, self.y),
            Coordinate(self.x, self.y + 1),
        )

    def is_adjacent(self, other: Coordinate) -> bool:
        """Return True when ``other`` shares an edge with this cell."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


def reading_order(coord: Coordinate) -> Tuple[int, int]:
    """Sort key ordering cells top to bottom, then left to right."""
    return (coord.y, coord.x)


def opposing_faction(faction: Faction) -> Faction:
    return "goblin" if faction == "elf" else "elf"


__all__ = ["Coordinate", "FACTIONS", "Faction", "opposing_faction", "reading_order"]
