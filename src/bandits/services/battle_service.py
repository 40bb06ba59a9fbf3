"""Battle service driving rounds, outcomes and the attack-power search."""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import List, Tuple

from bandits.core.types import FACTIONS, Faction, reading_order
from bandits.domain.battle_models import DEFAULT_ATTACK_POWER, BattleState
from bandits.services import combat, movement
from bandits.services.errors import BattleStalemateError, InvariantViolation
from bandits.services.events import (
    BattleEvent,
    BattleResolvedEvent,
    CombatantDefeatedEvent,
    RoundCompletedEvent,
)

logger = logging.getLogger(__name__)

SUPER_POWER_START = DEFAULT_ATTACK_POWER + 1
SUPER_POWER_CEILING = 200


@dataclass(slots=True)
class BattleOutcome:
    """Result of a battle run to completion."""

    rounds: int
    hit_points: int
    victor: Faction | None
    attack_power: int | None = None  # boosted power, when produced by a power search

    @property
    def score(self) -> int:
        return self.rounds * self.hit_points

    def as_tuple(self) -> Tuple[int, int]:
        return (self.rounds, self.hit_points)


class BattleService:
    """Deterministic round driver for elf and goblin battles."""

    def __init__(self, *, max_attack_power: int = SUPER_POWER_CEILING) -> None:
        self._max_attack_power = max_attack_power

    # -----------------------
    # Turn Stages
    # -----------------------
    def turn_order(self, battle_state: BattleState) -> List[str]:
        """Identities of every living combatant, in reading order of their current cells."""
        ordered = sorted(battle_state.combatants.values(), key=lambda c: reading_order(c.position))
        return [c.instance_id for c in ordered]

    def has_targets(self, battle_state: BattleState, instance_id: str) -> bool | None:
        """None when the combatant is gone, otherwise whether any enemy is still alive."""
        combatant = battle_state.combatants.get(instance_id)
        if combatant is None:
            return None
        return any(other.faction != combatant.faction for other in battle_state.combatants.values())

    def take_turn(self, battle_state: BattleState, instance_id: str) -> List[BattleEvent]:
        """Move then attack. A combatant removed earlier in the round does nothing."""
        if instance_id not in battle_state.combatants:
            return []
        events: List[BattleEvent] = []
        moved = movement.move(battle_state, instance_id)
        if moved is not None:
            events.append(moved)
        events.extend(combat.attack(battle_state, instance_id))
        self._check_invariants(battle_state)
        return events

    # -----------------------
    # Round Driver
    # -----------------------
    def run_round(self, battle_state: BattleState) -> List[BattleEvent]:
        """Run one round. ``round_number`` only advances when every turn was taken."""
        if battle_state.is_over:
            return []
        events: List[BattleEvent] = []
        for instance_id in self.turn_order(battle_state):
            if self.has_targets(battle_state, instance_id) is False:
                events.append(self._resolve(battle_state))
                return events
            events.extend(self.take_turn(battle_state, instance_id))
        battle_state.round_number += 1
        events.append(RoundCompletedEvent(round_number=battle_state.round_number))
        logger.debug(
            "Round %d complete: %d elves, %d goblins, %d hit points",
            battle_state.round_number,
            battle_state.count("elf"),
            battle_state.count("goblin"),
            battle_state.hit_points_sum(),
        )
        return events

    def advance_round(self, battle_state: BattleState) -> List[BattleEvent]:
        """Like run_round, but raise BattleStalemateError when a full round changes nothing."""
        events = self.run_round(battle_state)
        if not battle_state.is_over and all(isinstance(event, RoundCompletedEvent) for event in events):
            raise BattleStalemateError(battle_state.round_number)
        return events

    def final_round(self, battle_state: BattleState) -> BattleOutcome:
        """Run rounds until one faction is eliminated and report the outcome."""
        while not battle_state.is_over:
            self.advance_round(battle_state)
        outcome = self.outcome(battle_state)
        logger.info(
            "Battle over after %d full rounds: %s win with %d hit points (outcome %d)",
            outcome.rounds,
            outcome.victor,
            outcome.hit_points,
            outcome.score,
        )
        return outcome

    def outcome(self, battle_state: BattleState) -> BattleOutcome:
        return BattleOutcome(
            rounds=battle_state.round_number,
            hit_points=battle_state.hit_points_sum(),
            victor=battle_state.victor,
        )

    # -----------------------
    # Attack-Power Search
    # -----------------------
    def run_without_losses(self, battle_state: BattleState, faction: Faction) -> BattleOutcome | None:
        """Run the battle to completion, giving up as soon as ``faction`` loses anyone.

        A battle that stalls before either side is wiped out is not a victory either.
        """
        while not battle_state.is_over:
            try:
                events = self.advance_round(battle_state)
            except BattleStalemateError as exc:
                logger.debug("%s; no flawless %s victory", exc, faction)
                return None
            for event in events:
                if isinstance(event, CombatantDefeatedEvent) and event.faction == faction:
                    return None
        return self.outcome(battle_state)

    def find_minimum_power(
        self,
        battle_state: BattleState,
        faction: Faction = "elf",
        *,
        start_power: int = SUPER_POWER_START,
        max_power: int | None = None,
    ) -> BattleOutcome | None:
        """Smallest attack power for ``faction`` that wins without a single loss.

        Powers are tried one by one from ``start_power``; each attempt runs on
        its own copy of ``battle_state``, which is left untouched.
        """
        if faction not in FACTIONS:
            raise ValueError(f"Unknown faction '{faction}'.")
        ceiling = self._max_attack_power if max_power is None else max_power
        if start_power < 1 or ceiling < start_power:
            raise ValueError(f"Invalid attack power range {start_power}..{ceiling}.")
        if battle_state.count(faction) == 0:
            raise ValueError(f"Battle has no {faction} combatants to protect.")

        for power in range(start_power, ceiling + 1):
            candidate = copy.deepcopy(battle_state)
            for combatant in candidate.iter_faction(faction):
                combatant.attack_power = power
            result = self.run_without_losses(candidate, faction)
            if result is None:
                logger.debug("Attack power %d: %s suffered losses", power, faction)
                continue
            result.attack_power = power
            logger.info("Attack power %d is the minimum for a flawless %s victory", power, faction)
            return result
        logger.info("No attack power up to %d keeps every %s alive", ceiling, faction)
        return None

    def super_powered_elves(self, battle_state: BattleState) -> BattleOutcome | None:
        return self.find_minimum_power(battle_state, "elf")

    # -----------------------
    # Helpers
    # -----------------------
    def _resolve(self, battle_state: BattleState) -> BattleResolvedEvent:
        victor = battle_state.victor
        if victor is None:
            raise InvariantViolation("Battle ended with no faction standing")
        return BattleResolvedEvent(victor=victor, rounds=battle_state.round_number)

    def _check_invariants(self, battle_state: BattleState) -> None:
        positions = [c.position for c in battle_state.combatants.values()]
        if len(set(positions)) != len(positions):
            raise InvariantViolation("Two combatants share a cell")
        stray = [p for p in positions if not battle_state.terrain.is_open(p)]
        if stray:
            raise InvariantViolation(f"Combatants outside open terrain at {stray}")
