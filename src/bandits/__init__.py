"""Beverage bandits: a deterministic elf and goblin grid battle simulator."""

__version__ = "1.0.0"
