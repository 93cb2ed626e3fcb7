"""
Core system module for the monster fight simulator.

This module contains the fundamental components and utilities that power the
simulator, including game constants, health arithmetic, logging, settings,
validation and display utilities.
"""

from .constants import (
    DEFAULT_DAMAGE_PER_HIT,
    DEFAULT_MAX_ATTEMPTS,
    GLOBAL_VERBOSE_LEVEL,
    MonsterKind,
    NiceEnum,
    Weapon,
)
from .health import (
    NO_HEALTH,
    HealthPoints,
    clamp_reduce,
    max_health,
)
from .settings import FightSettings
from .utils import (
    cprint,
    crule,
    make_bar,
)
from .validation import (
    require_enum_type,
    require_int_at_least,
)

__all__ = [
    # Import from constants.py
    "DEFAULT_DAMAGE_PER_HIT",
    "DEFAULT_MAX_ATTEMPTS",
    "GLOBAL_VERBOSE_LEVEL",
    "MonsterKind",
    "NiceEnum",
    "Weapon",
    # Import from health.py
    "NO_HEALTH",
    "HealthPoints",
    "clamp_reduce",
    "max_health",
    # Import from settings.py
    "FightSettings",
    # Import from utils.py
    "cprint",
    "crule",
    "make_bar",
    # Import from validation.py
    "require_enum_type",
    "require_int_at_least",
]
