"""Factory helpers for runtime entities."""

from .id_factory import make_combatant_id

__all__ = [
    "make_combatant_id",
]
