from __future__ import annotations

import pytest

from bandits.core.types import Coordinate
from bandits.data import parse_board
from bandits.services import BattleService, InvariantViolation
from bandits.services.movement import distances_from, move, plan_step
from tests.helpers.boards import MOVEMENT_SPREAD, positions


def test_plan_step_picks_nearest_target_first_in_reading_order() -> None:
    state = parse_board(
        """
#######
#E..G.#
#...#.#
#.G.#G#
#######
"""
    )

    # (3,1), (2,2) and (1,3) are all two steps away; (3,1) comes first.
    assert plan_step(state, "elf_1_1") == Coordinate(2, 1)


def test_plan_step_breaks_first_step_ties_in_reading_order() -> None:
    state = parse_board(
        """
#######
#.E...#
#.....#
#...G.#
#######
"""
    )

    # Destination (4,2) is reachable by stepping right or down; right comes first.
    assert plan_step(state, "elf_2_1") == Coordinate(3, 1)


def test_plan_step_stays_when_enemy_adjacent() -> None:
    state = parse_board(
        """
######
#.EG.#
######
"""
    )

    assert plan_step(state, "elf_2_1") is None
    assert move(state, "elf_2_1") is None
    assert state.combatants["elf_2_1"].position == Coordinate(2, 1)


def test_plan_step_stays_when_no_target_reachable() -> None:
    state = parse_board(
        """
#######
#E.#.G#
#######
"""
    )

    assert plan_step(state, "elf_1_1") is None


def test_plan_step_routes_around_other_combatants() -> None:
    state = parse_board(
        """
#######
#.....#
#EE..G#
#.....#
#######
"""
    )

    # The elf behind its ally must leave the row to get past it.
    assert plan_step(state, "elf_1_2") == Coordinate(1, 1)


def test_plan_step_for_missing_combatant_is_none() -> None:
    state = parse_board("#####\n#E.G#\n#####")

    assert plan_step(state, "elf_9_9") is None


def test_move_emits_event_and_updates_position() -> None:
    state = parse_board("######\n#E..G#\n######")

    event = move(state, "elf_1_1")

    assert event is not None
    assert event.origin == Coordinate(1, 1)
    assert event.destination == Coordinate(2, 1)
    assert state.combatants["elf_1_1"].position == Coordinate(2, 1)


def test_distances_from_only_crosses_passable_cells() -> None:
    passable = frozenset({Coordinate(1, 0), Coordinate(2, 0), Coordinate(2, 1)})

    distances = distances_from(Coordinate(0, 0), passable)

    assert distances == {
        Coordinate(0, 0): 0,
        Coordinate(1, 0): 1,
        Coordinate(2, 0): 2,
        Coordinate(2, 1): 3,
    }


def test_first_round_spreads_goblins_toward_the_elf() -> None:
    service = BattleService()
    state = parse_board(MOVEMENT_SPREAD)

    service.run_round(state)

    assert positions(state, "elf") == {(4, 3)}
    assert positions(state, "goblin") == {(2, 1), (6, 1), (4, 2), (7, 3), (2, 4), (1, 6), (4, 6), (7, 6)}


def test_move_refuses_to_step_onto_an_occupied_cell(monkeypatch: pytest.MonkeyPatch) -> None:
    state = parse_board("######\n#E.EG#\n######")
    monkeypatch.setattr("bandits.services.movement.plan_step", lambda _state, _id: Coordinate(3, 1))

    with pytest.raises(InvariantViolation):
        move(state, "elf_1_1")
