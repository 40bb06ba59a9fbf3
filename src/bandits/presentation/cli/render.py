"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from bandits.core.types import Coordinate, Faction
from bandits.domain.battle_models import BattleCombatantView, BattleState
from bandits.services.battle_service import BattleOutcome
from bandits.services.events import (
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    CombatantDefeatedEvent,
    CombatantMovedEvent,
    RoundCompletedEvent,
)

_SYMBOLS: Dict[Faction, str] = {"elf": "E", "goblin": "G"}
_PLURALS: Dict[Faction, str] = {"elf": "Elves", "goblin": "Goblins"}


def render_battle(battle_state: BattleState) -> List[str]:
    """
    Draw the board one line per row, followed by the health of each combatant on that row.

    Example row: ``#..GEG#   G(200), E(188), G(194)``
    """
    by_cell: Dict[Coordinate, BattleCombatantView] = {Coordinate(v.x, v.y): v for v in battle_state.views()}
    terrain = battle_state.terrain
    lines: List[str] = []
    for y in range(terrain.height):
        cells: List[str] = []
        health: List[str] = []
        for x in range(terrain.width):
            coord = Coordinate(x, y)
            view = by_cell.get(coord)
            if view is not None:
                symbol = _SYMBOLS[view.faction]
                cells.append(symbol)
                health.append(f"{symbol}({view.hp})")
            elif terrain.is_open(coord):
                cells.append(".")
            else:
                cells.append("#")
        row = "".join(cells)
        if health:
            row = f"{row}   {', '.join(health)}"
        lines.append(row)
    return lines


def format_event(event: BattleEvent) -> str | None:
    if isinstance(event, CombatantMovedEvent):
        return (
            f"{event.combatant_id} moves ({event.origin.x},{event.origin.y})"
            f" -> ({event.destination.x},{event.destination.y})"
        )
    if isinstance(event, AttackResolvedEvent):
        return f"{event.attacker_id} hits {event.target_id} for {event.damage} ({event.target_hp} hp left)"
    if isinstance(event, CombatantDefeatedEvent):
        return f"{event.combatant_id} is defeated"
    if isinstance(event, RoundCompletedEvent):
        return f"Round {event.round_number} complete"
    if isinstance(event, BattleResolvedEvent):
        return f"{_PLURALS[event.victor]} win after {event.rounds} full rounds"
    return None


def format_outcome(title: str, outcome: BattleOutcome) -> List[str]:
    lines = [
        f"Winner: {outcome.victor or 'nobody'}",
        f"Full rounds: {outcome.rounds}",
        f"Hit points left: {outcome.hit_points}",
        f"Outcome: {outcome.score}",
    ]
    if outcome.attack_power is not None:
        lines.insert(1, f"Attack power: {outcome.attack_power}")
    return [f"=== {title} ===", *lines]


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def render_events(events: Sequence[BattleEvent]) -> None:
    for event in events:
        text = format_event(event)
        if text:
            print(f"- {text}")
