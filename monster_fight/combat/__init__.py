"""
Combat system module for the monster fight simulator.

This module resolves strikes against monsters, checks whether they are dead,
and runs the fight loop that strikes repeatedly until death or exhaustion.
"""

from .fight import FightResult, run_fight
from .resolver import (
    HitOutcome,
    UnknownMonsterError,
    is_dead,
    resolve_hit,
    resolve_hits,
)

__all__ = [
    # Import from fight.py
    "FightResult",
    "run_fight",
    # Import from resolver.py
    "HitOutcome",
    "UnknownMonsterError",
    "is_dead",
    "resolve_hit",
    "resolve_hits",
]
