"""Helpers turning board text into a starting battle state."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Set

from bandits.core.types import Coordinate, Faction
from bandits.domain.battle_models import DEFAULT_ATTACK_POWER, BattleState, Combatant, Terrain
from bandits.services.factories import make_combatant_id

from .errors import BoardLoadError, InvalidBoardError

WALL = "#"
FLOOR = "."
_FACTION_BY_CHAR: Dict[str, Faction] = {"E": "elf", "G": "goblin"}


def parse_board(
    text: str,
    *,
    elf_power: int = DEFAULT_ATTACK_POWER,
    goblin_power: int = DEFAULT_ATTACK_POWER,
) -> BattleState:
    """Parse a rectangular board of ``#``, ``.``, ``E`` and ``G`` characters.

    Blank lines before and after the board are ignored. Any other irregularity
    raises :class:`InvalidBoardError`.
    """
    rows = _board_rows(text)
    width = len(rows[0])
    power_by_faction: Dict[Faction, int] = {"elf": elf_power, "goblin": goblin_power}

    open_cells: Set[Coordinate] = set()
    combatants: Dict[str, Combatant] = {}
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidBoardError(
                f"Board is not rectangular: expected {width} columns, found {len(row)}",
                line=y + 1,
            )
        for x, char in enumerate(row):
            coord = Coordinate(x, y)
            if char == WALL:
                continue
            if char == FLOOR:
                open_cells.add(coord)
                continue
            faction = _FACTION_BY_CHAR.get(char)
            if faction is None:
                raise InvalidBoardError(f"Unrecognised board character {char!r}", line=y + 1, column=x + 1)
            open_cells.add(coord)
            instance_id = make_combatant_id(faction, coord)
            combatants[instance_id] = Combatant(
                instance_id=instance_id,
                faction=faction,
                position=coord,
                attack_power=power_by_faction[faction],
            )

    terrain = Terrain(open_cells=frozenset(open_cells), width=width, height=len(rows))
    return BattleState(terrain=terrain, combatants=combatants)


def load_board(path: Path | str, **kwargs: int) -> BattleState:
    """Load and parse a board file, raising BoardLoadError on I/O failure."""
    board_path = Path(path)
    try:
        text = board_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise BoardLoadError(f"Board file not found: {board_path}") from exc
    except OSError as exc:
        raise BoardLoadError(f"Unable to read board file: {board_path}") from exc
    return parse_board(text, **kwargs)


def _board_rows(text: str) -> List[str]:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise InvalidBoardError("Board is empty")
    return lines
