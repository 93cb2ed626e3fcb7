"""
Monster fight simulator.

A minimal turn-based combat simulator: wolves, firelords and ghosts, each
reacting differently to sticks, arrows and fireballs, struck repeatedly until
they die or the attempts run out.
"""

from .combat import (
    FightResult,
    HitOutcome,
    UnknownMonsterError,
    is_dead,
    resolve_hit,
    resolve_hits,
    run_fight,
)
from .core import FightSettings, HealthPoints, MonsterKind, Weapon
from .monsters import Firelord, Ghost, Monster, Wolf, parse_monster

__all__ = [
    "FightResult",
    "FightSettings",
    "Firelord",
    "Ghost",
    "HealthPoints",
    "HitOutcome",
    "Monster",
    "MonsterKind",
    "UnknownMonsterError",
    "Weapon",
    "Wolf",
    "is_dead",
    "parse_monster",
    "resolve_hit",
    "resolve_hits",
    "run_fight",
]
