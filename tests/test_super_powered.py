from __future__ import annotations

import pytest

from bandits.services import BattleService
from tests.helpers.boards import EXAMPLE_1, EXAMPLE_2, SUPER_POWERED_OUTCOMES, battle


@pytest.mark.parametrize(("board", "power", "rounds", "hit_points"), SUPER_POWERED_OUTCOMES)
def test_super_powered_elves_matches_worked_examples(board: str, power: int, rounds: int, hit_points: int) -> None:
    service = BattleService()
    state = battle(board)
    elves_before = {c.instance_id for c in state.iter_faction("elf")}

    outcome = service.super_powered_elves(state)

    assert outcome is not None
    assert outcome.attack_power == power
    assert outcome.as_tuple() == (rounds, hit_points)
    assert outcome.victor == "elf"
    # the search runs on copies, so the starting board still has every elf
    assert {c.instance_id for c in state.iter_faction("elf")} == elves_before


def test_super_powered_elves_leaves_initial_battle_untouched() -> None:
    service = BattleService()
    state = battle(EXAMPLE_1)

    service.super_powered_elves(state)

    assert state.round_number == 0
    assert {c.hp for c in state.combatants.values()} == {200}
    assert {c.attack_power for c in state.combatants.values()} == {3}


def test_flawless_winner_keeps_every_elf_identity() -> None:
    service = BattleService()
    state = battle(EXAMPLE_1)
    elves_before = {c.instance_id for c in state.iter_faction("elf")}
    candidate = battle(EXAMPLE_1)
    for elf in candidate.iter_faction("elf"):
        elf.attack_power = 15

    outcome = service.run_without_losses(candidate, "elf")

    assert outcome is not None
    assert {c.instance_id for c in candidate.iter_faction("elf")} == elves_before


def test_run_without_losses_gives_up_on_first_death() -> None:
    service = BattleService()
    candidate = battle(EXAMPLE_1)
    for elf in candidate.iter_faction("elf"):
        elf.attack_power = 14

    assert service.run_without_losses(candidate, "elf") is None
    assert candidate.count("elf") < 2


def test_find_minimum_power_respects_ceiling() -> None:
    service = BattleService(max_attack_power=14)

    assert service.super_powered_elves(battle(EXAMPLE_1)) is None
    assert service.find_minimum_power(battle(EXAMPLE_1), "elf", max_power=15).attack_power == 15


def test_find_minimum_power_for_goblins() -> None:
    service = BattleService()

    outcome = service.find_minimum_power(battle(EXAMPLE_2), "goblin")

    assert outcome is not None
    assert outcome.victor == "goblin"
    assert outcome.attack_power is not None and outcome.attack_power >= 4


@pytest.mark.parametrize(
    ("faction", "start_power", "max_power"),
    [("dwarf", 4, 200), ("elf", 0, 200), ("elf", 10, 9)],
)
def test_find_minimum_power_rejects_bad_arguments(faction: str, start_power: int, max_power: int) -> None:
    service = BattleService()

    with pytest.raises(ValueError):
        service.find_minimum_power(battle(EXAMPLE_1), faction, start_power=start_power, max_power=max_power)


def test_find_minimum_power_requires_protected_faction() -> None:
    service = BattleService()

    with pytest.raises(ValueError):
        service.super_powered_elves(battle("#####\n#G.G#\n#####"))


def test_super_powered_elves_treats_stalled_battle_as_failure() -> None:
    service = BattleService()
    # the second goblin sits behind a wall no elf can get around
    state = battle("#########\n#EG.#..G#\n#########")

    assert service.find_minimum_power(state, "elf", max_power=10) is None
    assert service.super_powered_elves(battle("#########\n#EG.#..G#\n#########")) is None
