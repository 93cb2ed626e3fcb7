"""
Monster model module for the monster fight simulator.

This module contains the closed set of fightable monster kinds and the helpers
to build them from raw data.
"""

from .monster import (
    MONSTER_TYPES,
    BaseMonster,
    Firelord,
    Ghost,
    Monster,
    Wolf,
    parse_monster,
    sample_monster,
)

__all__ = [
    "MONSTER_TYPES",
    "BaseMonster",
    "Firelord",
    "Ghost",
    "Monster",
    "Wolf",
    "parse_monster",
    "sample_monster",
]
