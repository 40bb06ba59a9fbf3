"""Movement planning: breadth-first search toward the nearest attack position.

A combatant that is not already next to an enemy picks a destination among
the open, unoccupied cells adjacent to any enemy ("in range" cells):

1. the in-range cells at minimum walking distance are found with a BFS from
   the combatant; the first of them in reading order is the destination;
2. a second BFS from that destination measures how far each of the
   combatant's neighbours is from it; the first neighbour in reading order
   lying on a shortest path is the step taken.

The two tie-breaks are applied separately, in that order.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, Iterable, Set

from bandits.core.types import Coordinate, opposing_faction, reading_order
from bandits.domain.battle_models import BattleState, Combatant
from bandits.services.errors import InvariantViolation
from bandits.services.events import CombatantMovedEvent


def distances_from(origin: Coordinate, passable: FrozenSet[Coordinate]) -> Dict[Coordinate, int]:
    """Return walking distances from ``origin`` to every reachable passable cell.

    ``origin`` itself is included at distance 0 whether or not it is passable.
    """
    distances: Dict[Coordinate, int] = {origin: 0}
    frontier = deque([origin])
    while frontier:
        current = frontier.popleft()
        for neighbour in current.neighbours():
            if neighbour in passable and neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                frontier.append(neighbour)
    return distances


def in_range_cells(state: BattleState, combatant: Combatant, open_cells: FrozenSet[Coordinate]) -> Set[Coordinate]:
    """Open, unoccupied cells adjacent to any living enemy of ``combatant``."""
    cells: Set[Coordinate] = set()
    for enemy in state.iter_faction(opposing_faction(combatant.faction)):
        cells.update(n for n in enemy.position.neighbours() if n in open_cells)
    return cells


def enemy_adjacent(state: BattleState, combatant: Combatant) -> bool:
    return any(
        combatant.is_enemy_of(other) and other.position.is_adjacent(combatant.position)
        for other in state.combatants.values()
    )


def choose_destination(origin: Coordinate, targets: Iterable[Coordinate], open_cells: FrozenSet[Coordinate]) -> Coordinate | None:
    """Nearest reachable target, ties broken by reading order."""
    distances = distances_from(origin, open_cells)
    reachable = [cell for cell in targets if cell in distances]
    if not reachable:
        return None
    return min(reachable, key=lambda cell: (distances[cell], reading_order(cell)))


def choose_first_step(origin: Coordinate, destination: Coordinate, open_cells: FrozenSet[Coordinate]) -> Coordinate:
    """First neighbour of ``origin`` (in reading order) that starts a shortest path to ``destination``."""
    to_destination = distances_from(destination, open_cells)
    candidates = [n for n in origin.neighbours() if n in open_cells and n in to_destination]
    if not candidates:
        raise InvariantViolation(f"No first step from {origin} toward reachable destination {destination}")
    return min(candidates, key=lambda cell: (to_destination[cell], reading_order(cell)))


def plan_step(state: BattleState, instance_id: str) -> Coordinate | None:
    """Return the cell the combatant should step into this turn, or None to stay put."""
    combatant = state.combatants.get(instance_id)
    if combatant is None or enemy_adjacent(state, combatant):
        return None
    open_cells = state.open_unoccupied()
    destination = choose_destination(combatant.position, in_range_cells(state, combatant, open_cells), open_cells)
    if destination is None:
        return None
    return choose_first_step(combatant.position, destination, open_cells)


def move(state: BattleState, instance_id: str) -> CombatantMovedEvent | None:
    """Apply the planned step for ``instance_id``, if any."""
    step = plan_step(state, instance_id)
    if step is None:
        return None
    combatant = state.combatants[instance_id]
    if step in state.occupancy() or not state.terrain.is_open(step):
        raise InvariantViolation(f"{instance_id} cannot step into {step}")
    origin = combatant.position
    combatant.position = step
    return CombatantMovedEvent(combatant_id=instance_id, origin=origin, destination=step)
