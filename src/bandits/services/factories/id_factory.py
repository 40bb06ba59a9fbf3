"""Utilities for creating deterministic instance identifiers."""
from __future__ import annotations

from bandits.core.types import Coordinate, Faction


def make_combatant_id(faction: Faction, start: Coordinate) -> str:
    """Derive a stable identifier from the combatant's faction and starting cell."""
    return f"{faction}_{start.x}_{start.y}"
