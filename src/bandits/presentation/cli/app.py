"""Console runner for beverage bandits battles."""
from __future__ import annotations

import argparse
import copy
import logging
from pathlib import Path
from typing import List, Sequence

from bandits.data import BoardError, load_board
from bandits.domain.battle_models import BattleState
from bandits.services import BattleOutcome, BattleService, BattleStalemateError
from bandits.services.events import BattleEvent, BattleResolvedEvent

from .config import configure_logging, debug_enabled, load_config
from .render import format_outcome, render_battle, render_events, render_heading, render_lines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bandits", description="Simulate an elf and goblin cave battle.")
    parser.add_argument("board", type=Path, help="Path to the board text file")
    parser.add_argument(
        "--elves",
        action="store_true",
        help="Also find the smallest elf attack power that avoids any elf death",
    )
    parser.add_argument("--max-power", type=int, default=None, help="Highest elf attack power to try")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config: WARNING)")
    parser.add_argument("--trace", action="store_true", help="Print the board and events after every round")
    parser.add_argument("--config", type=Path, default=None, help="Alternative config file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(str(args.log_level or config["log_level"]))

    try:
        battle_state = load_board(args.board)
    except BoardError as exc:
        print(f"Cannot load board: {exc}")
        return 1
    logger.debug(
        "Loaded %s: %d elves, %d goblins", args.board, battle_state.count("elf"), battle_state.count("goblin")
    )

    max_power = args.max_power if args.max_power is not None else int(config["max_attack_power"])
    service = BattleService(max_attack_power=max_power)
    initial = copy.deepcopy(battle_state)

    trace = args.trace or debug_enabled()
    try:
        outcome = _run_battle(service, battle_state, trace=trace)
    except BattleStalemateError as exc:
        print(f"Battle cannot finish: {exc}")
        return 1
    render_lines(format_outcome("Battle", outcome))

    if args.elves:
        try:
            boosted = service.super_powered_elves(initial)
        except (BattleStalemateError, ValueError) as exc:
            print(f"Cannot search elf attack power: {exc}")
            return 1
        if boosted is None:
            print(f"No elf attack power up to {max_power} avoids elf losses.")
        else:
            render_lines(format_outcome("Super-powered elves", boosted))
    return 0


def _run_battle(service: BattleService, battle_state: BattleState, *, trace: bool) -> BattleOutcome:
    if not trace:
        return service.final_round(battle_state)
    render_heading("Initially")
    render_lines(render_battle(battle_state))
    events: List[BattleEvent] = []
    while not battle_state.is_over:
        events = service.advance_round(battle_state)
        render_heading(_round_title(battle_state, events))
        render_events(events)
        render_lines(render_battle(battle_state))
    if not _resolved(events):
        # last enemy fell on the final turn of a full round; the next round ends at its first turn
        render_heading(f"Combat ends during round {battle_state.round_number + 1}")
    return service.final_round(battle_state)


def _resolved(events: Sequence[BattleEvent]) -> bool:
    return any(isinstance(event, BattleResolvedEvent) for event in events)


def _round_title(battle_state: BattleState, events: Sequence[BattleEvent]) -> str:
    if _resolved(events):
        return f"Combat ends during round {battle_state.round_number + 1}"
    plural = "" if battle_state.round_number == 1 else "s"
    return f"After {battle_state.round_number} round{plural}"
