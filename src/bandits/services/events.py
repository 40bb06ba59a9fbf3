"""Structured events emitted while a battle progresses."""
from __future__ import annotations

from dataclasses import dataclass

from bandits.core.types import Coordinate, Faction


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class CombatantMovedEvent(BattleEvent):
    combatant_id: str
    origin: Coordinate
    destination: Coordinate


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_id: str
    target_id: str
    damage: int
    target_hp: int


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_id: str
    faction: Faction


@dataclass(slots=True)
class RoundCompletedEvent(BattleEvent):
    round_number: int


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    victor: Faction
    rounds: int
