"""Domain models for battles."""

from .battle_models import BattleCombatantView, BattleState, Combatant, Terrain

__all__ = [
    "BattleCombatantView",
    "BattleState",
    "Combatant",
    "Terrain",
]
