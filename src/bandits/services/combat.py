"""Combat resolution for a single attacker."""
from __future__ import annotations

from typing import List

from bandits.core.types import reading_order
from bandits.domain.battle_models import BattleState, Combatant
from bandits.services.events import AttackResolvedEvent, BattleEvent, CombatantDefeatedEvent


def select_target(state: BattleState, attacker: Combatant) -> Combatant | None:
    """Weakest adjacent enemy; ties go to the first in reading order."""
    adjacent = [
        other
        for other in state.combatants.values()
        if attacker.is_enemy_of(other) and other.position.is_adjacent(attacker.position)
    ]
    if not adjacent:
        return None
    return min(adjacent, key=lambda c: (c.hp, reading_order(c.position)))


def attack(state: BattleState, instance_id: str) -> List[BattleEvent]:
    attacker = state.combatants.get(instance_id)
    if attacker is None:
        return []
    target = select_target(state, attacker)
    if target is None:
        return []

    damage = attacker.attack_power
    events: List[BattleEvent] = []
    if target.hp <= damage:
        del state.combatants[target.instance_id]
        events.append(
            AttackResolvedEvent(attacker_id=instance_id, target_id=target.instance_id, damage=target.hp, target_hp=0)
        )
        events.append(CombatantDefeatedEvent(combatant_id=target.instance_id, faction=target.faction))
    else:
        target.hp -= damage
        events.append(
            AttackResolvedEvent(attacker_id=instance_id, target_id=target.instance_id, damage=damage, target_hp=target.hp)
        )
    return events
