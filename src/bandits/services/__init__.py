"""Service layer exports."""

from .errors import BattleStalemateError, InvariantViolation
from .battle_service import BattleOutcome, BattleService

__all__ = [
    "BattleOutcome",
    "BattleService",
    "BattleStalemateError",
    "InvariantViolation",
]
