"""
Fight loop module for the simulator.

Repeatedly strikes a monster with the same weapon and damage until it dies or
the attempt budget runs out.
"""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from monster_fight.core.constants import DEFAULT_DAMAGE_PER_HIT, DEFAULT_MAX_ATTEMPTS, Weapon
from monster_fight.core.logging import log_debug, log_info
from monster_fight.core.validation import require_enum_type, require_int_at_least
from monster_fight.monsters.monster import Monster

from .resolver import HitOutcome, is_dead, resolve_hit


class FightResult(BaseModel):
    """The outcome of a fight against a single monster."""

    model_config = ConfigDict(frozen=True)

    monster: Monster = Field(
        description="The monster as it was when the fight ended.",
    )
    attempts: int = Field(
        description="The number of strikes it took, or the budget if it survived.",
    )
    weapon: Weapon = Field(
        description="The weapon used for every strike.",
    )
    damage_per_hit: int = Field(
        description="The raw damage of every strike.",
    )
    max_attempts: int = Field(
        description="The attempt budget of the fight.",
    )
    narration: list[str] = Field(
        default_factory=list,
        description="The narration of every strike, in order.",
    )

    @property
    def dead(self) -> bool:
        """True if the monster did not survive the fight."""
        return is_dead(self.monster)

    @property
    def exhausted(self) -> bool:
        """True if the budget ran out with the monster still alive."""
        return not self.dead


def run_fight(
    monster: Monster,
    weapon: Weapon,
    damage_per_hit: int = DEFAULT_DAMAGE_PER_HIT,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    on_hit: Optional[Callable[[int, HitOutcome], None]] = None,
    record_narration: bool = True,
) -> FightResult:
    """
    Fights a monster until it dies or the attempts run out.

    Args:
        monster (Monster):
            The monster to fight. It is not modified.
        weapon (Weapon):
            The weapon used for every strike.
        damage_per_hit (int):
            The raw damage of every strike. Defaults to 40.
        max_attempts (int):
            The maximum number of strikes. Defaults to 5.
        on_hit (Optional[Callable[[int, HitOutcome], None]]):
            Called after every strike with the attempt number and its
            outcome, e.g. to display the narration.
        record_narration (bool):
            Whether to keep every strike narration in the result. Long fights
            against a ghost should pass False. Defaults to True.

    Raises:
        ValueError:
            If the weapon is not a Weapon, the damage is negative or the
            budget is lower than one attempt.

    Returns:
        FightResult:
            The final monster and the number of attempts taken.

    """
    context = {"monster": getattr(monster, "kind", type(monster).__name__), "weapon": weapon}
    require_enum_type(weapon, Weapon, "weapon", context)
    require_int_at_least(damage_per_hit, "damage_per_hit", 0, context)
    require_int_at_least(max_attempts, "max_attempts", 1, context)

    log_debug(
        "Fight started",
        {**context, "damage_per_hit": damage_per_hit, "max_attempts": max_attempts},
    )

    narration: list[str] = []
    attempt = 1
    while True:
        outcome = resolve_hit(monster, weapon, damage_per_hit)
        monster = outcome.monster
        if record_narration:
            narration.append(outcome.narration)
        if on_hit is not None:
            on_hit(attempt, outcome)
        if is_dead(monster):
            break
        attempt += 1
        if attempt > max_attempts:
            attempt = max_attempts
            break

    result = FightResult(
        monster=monster,
        attempts=attempt,
        weapon=weapon,
        damage_per_hit=damage_per_hit,
        max_attempts=max_attempts,
        narration=narration,
    )
    log_info(
        "Fight finished",
        {**context, "attempts": result.attempts, "dead": result.dead},
    )
    return result
