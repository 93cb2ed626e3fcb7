"""
Hit resolution module for the simulator.

Resolves a single strike against a monster and answers whether a monster is
dead. Dispatch is an exhaustive ``match`` over the closed set of monster
records: the fallthrough arms take a ``Never`` argument, so a static type
checker reports any kind or weapon left without a case, and at runtime a
foreign object is rejected instead of being silently ignored.
"""

from typing import Any, Iterable, NoReturn

from catchery import log_critical
from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Never

from monster_fight.core.constants import Weapon
from monster_fight.core.health import HealthPoints, clamp_reduce
from monster_fight.core.logging import log_debug
from monster_fight.core.validation import require_enum_type, require_int_at_least
from monster_fight.monsters.monster import (
    MONSTER_TYPES,
    Firelord,
    Ghost,
    Monster,
    Wolf,
    sample_monster,
)


class UnknownMonsterError(TypeError):
    """Raised when a value outside the closed set of monster kinds is dispatched on."""


class HitOutcome(BaseModel):
    """The result of resolving one strike against a monster."""

    model_config = ConfigDict(frozen=True)

    monster: Monster = Field(
        description="The monster after the strike.",
    )
    narration: str = Field(
        description="What happened, for display purposes only.",
    )


def _reject_unknown_monster(monster: Never) -> NoReturn:
    value: Any = monster
    log_critical(
        f"Cannot dispatch on unknown monster: {type(value).__name__}",
        {"monster": repr(value), "type": type(value).__name__},
    )
    raise UnknownMonsterError(f"Unknown monster kind: {type(value).__name__}")


def _reject_unknown_weapon(weapon: Never) -> NoReturn:
    value: Any = weapon
    log_critical(
        f"Cannot resolve hit with unknown weapon: {value!r}",
        {"weapon": repr(value)},
    )
    raise ValueError(f"Unknown weapon: {value!r}")


def _hit_wolf(wolf: Wolf, weapon: Weapon, damage: HealthPoints) -> HitOutcome:
    return HitOutcome(
        monster=wolf.model_copy(update={"health": clamp_reduce(wolf.health, damage)}),
        narration=(
            f"{wolf.name} the wolf growls as it takes {damage.value} damage from the hit."
        ),
    )


def _hit_firelord(
    firelord: Firelord, weapon: Weapon, damage: HealthPoints
) -> HitOutcome:
    match weapon:
        case Weapon.STICK:
            halved = damage / 2
            return HitOutcome(
                monster=firelord.model_copy(
                    update={"health": clamp_reduce(firelord.health, halved)}
                ),
                narration=(
                    f"{firelord.name} the Firelord resists wooden stick "
                    f"and only takes {halved.value} damage."
                ),
            )
        case Weapon.FIREBALL:
            return HitOutcome(
                monster=firelord,
                narration=(
                    f"{firelord.name} the Firelord is immune to fireballs. "
                    "He laughs at you."
                ),
            )
        case Weapon.ARROW:
            return HitOutcome(
                monster=firelord.model_copy(
                    update={"health": clamp_reduce(firelord.health, damage)}
                ),
                narration=(
                    f"{firelord.name} the Firelord roars {damage.value} damage from the hit."
                ),
            )
        case _:
            _reject_unknown_weapon(weapon)


def _hit_ghost(ghost: Ghost, weapon: Weapon, damage: HealthPoints) -> HitOutcome:
    return HitOutcome(monster=ghost, narration="Ghosts are immortal. You are doomed.")


def resolve_hit(
    monster: Monster, weapon: Weapon, damage: HealthPoints | int
) -> HitOutcome:
    """
    Strikes a monster once.

    The monster passed in is never modified; the outcome carries the updated
    record. Health reductions are clamped to a floor of 0.

    Args:
        monster (Monster):
            The monster being struck.
        weapon (Weapon):
            The weapon used for the strike.
        damage (HealthPoints | int):
            The raw damage of the strike, before resistances.

    Raises:
        UnknownMonsterError:
            If the monster is not one of the known kinds.
        ValueError:
            If the weapon is not a Weapon, or the damage is negative.

    Returns:
        HitOutcome:
            The updated monster and the narration of the strike.

    """
    require_enum_type(weapon, Weapon, "weapon")
    damage = HealthPoints.of(damage)
    # Hits never heal.
    require_int_at_least(damage.value, "damage", 0, {"weapon": weapon})

    match monster:
        case Wolf():
            outcome = _hit_wolf(monster, weapon, damage)
        case Firelord():
            outcome = _hit_firelord(monster, weapon, damage)
        case Ghost():
            outcome = _hit_ghost(monster, weapon, damage)
        case _:
            _reject_unknown_monster(monster)

    log_debug(
        outcome.narration,
        {"monster": monster.kind, "weapon": weapon, "damage": damage.value},
    )
    return outcome


def is_dead(monster: Monster) -> bool:
    """
    Checks whether a monster is dead.

    Wolves and firelords die when their health is no longer positive, ghosts
    never die.

    Raises:
        UnknownMonsterError: If the monster is not one of the known kinds.

    """
    match monster:
        case Wolf() | Firelord():
            return not monster.health
        case Ghost():
            return False
        case _:
            _reject_unknown_monster(monster)


def resolve_hits(
    monster: Monster, weapon: Weapon, damages: Iterable[HealthPoints | int]
) -> tuple[Monster, list[str]]:
    """
    Strikes a monster once per damage value, in order, regardless of death.

    Args:
        monster (Monster): The monster being struck.
        weapon (Weapon): The weapon used for every strike.
        damages (Iterable[HealthPoints | int]): The damage of each strike.

    Returns:
        tuple[Monster, list[str]]:
            The final monster and the narration of every strike.

    """
    narration: list[str] = []
    for damage in damages:
        outcome = resolve_hit(monster, weapon, damage)
        monster = outcome.monster
        narration.append(outcome.narration)
    return monster, narration


def _check_dispatch_coverage() -> None:
    """
    Strikes a sample of every monster kind with every weapon, so a kind
    without a case fails at import time instead of at its first fight.
    """
    for monster_type in MONSTER_TYPES.values():
        sample: Any = sample_monster(monster_type)
        is_dead(sample)
        for weapon in Weapon:
            resolve_hit(sample, weapon, 1)


_check_dispatch_coverage()
