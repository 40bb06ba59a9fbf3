"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List

from bandits.core.types import Coordinate, Faction, reading_order

DEFAULT_HP = 200
DEFAULT_ATTACK_POWER = 3


@dataclass(frozen=True, slots=True)
class Terrain:
    """Open floor cells of the cave. Walls are simply absent from ``open_cells``."""

    open_cells: FrozenSet[Coordinate]
    width: int
    height: int

    def is_open(self, coord: Coordinate) -> bool:
        return coord in self.open_cells


@dataclass(slots=True)
class Combatant:
    """Represents an individual elf or goblin on the board."""

    instance_id: str
    faction: Faction
    position: Coordinate
    hp: int = DEFAULT_HP
    attack_power: int = DEFAULT_ATTACK_POWER

    def is_enemy_of(self, other: Combatant) -> bool:
        return self.faction != other.faction


@dataclass(slots=True)
class BattleCombatantView:
    """Read-only snapshot of a combatant for rendering."""

    instance_id: str
    faction: Faction
    x: int
    y: int
    hp: int


@dataclass(slots=True)
class BattleState:
    """Tracks the terrain, living combatants and completed rounds of a battle.

    ``combatants`` owns every living combatant. A combatant is deleted from it
    the moment its health runs out; there are no dead entries.
    """

    terrain: Terrain
    combatants: Dict[str, Combatant] = field(default_factory=dict)
    round_number: int = 0

    def occupancy(self) -> Dict[Coordinate, str]:
        """Return a freshly built position-to-identity lookup."""
        return {combatant.position: combatant.instance_id for combatant in self.combatants.values()}

    def open_unoccupied(self) -> FrozenSet[Coordinate]:
        occupied = set(self.occupancy())
        return frozenset(cell for cell in self.terrain.open_cells if cell not in occupied)

    def iter_faction(self, faction: Faction) -> Iterator[Combatant]:
        return (c for c in self.combatants.values() if c.faction == faction)

    def count(self, faction: Faction) -> int:
        return sum(1 for _ in self.iter_faction(faction))

    def factions_present(self) -> FrozenSet[Faction]:
        return frozenset(c.faction for c in self.combatants.values())

    @property
    def is_over(self) -> bool:
        return len(self.factions_present()) < 2

    @property
    def victor(self) -> Faction | None:
        present = self.factions_present()
        if len(present) == 1:
            return next(iter(present))
        return None

    def hit_points_sum(self) -> int:
        return sum(c.hp for c in self.combatants.values())

    def views(self) -> List[BattleCombatantView]:
        """Return combatant views in reading order of their current positions."""
        ordered = sorted(self.combatants.values(), key=lambda c: reading_order(c.position))
        return [
            BattleCombatantView(
                instance_id=c.instance_id,
                faction=c.faction,
                x=c.position.x,
                y=c.position.y,
                hp=c.hp,
            )
            for c in ordered
        ]
