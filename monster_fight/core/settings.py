"""
Fight settings for the simulator.

Groups the tunable parameters of a fight in a single validated model, so the
command-line harness can build it once from its arguments.
"""

from pydantic import BaseModel, ConfigDict, Field

from monster_fight.core.constants import (
    DEFAULT_DAMAGE_PER_HIT,
    DEFAULT_MAX_ATTEMPTS,
    GLOBAL_VERBOSE_LEVEL,
)


class FightSettings(BaseModel):
    """Tunable parameters of a fight."""

    model_config = ConfigDict(frozen=True)

    damage_per_hit: int = Field(
        DEFAULT_DAMAGE_PER_HIT,
        ge=0,
        description="The damage dealt by every strike",
    )
    max_attempts: int = Field(
        DEFAULT_MAX_ATTEMPTS,
        ge=1,
        description="The number of strikes attempted before giving up",
    )
    verbose: int = Field(
        GLOBAL_VERBOSE_LEVEL,
        ge=0,
        le=2,
        description="Output detail level, from 0 (report only) to 2 (debug)",
    )
