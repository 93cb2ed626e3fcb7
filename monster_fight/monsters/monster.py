"""
Monster model module for the simulator.

Defines the closed set of monster kinds as plain, immutable data records. The
records carry no combat behaviour: hitting and killing them is handled by the
resolver in ``monster_fight.combat``.
"""

from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from monster_fight.core.constants import MonsterKind
from monster_fight.core.health import HealthPoints


class BaseMonster(BaseModel):
    """Common configuration and display helpers of all monster records."""

    model_config = ConfigDict(frozen=True)

    @property
    def monster_kind(self) -> MonsterKind:
        """Returns the kind of this monster."""
        return MonsterKind(getattr(self, "kind"))

    @property
    def display_name(self) -> str:
        return self.monster_kind.display_name

    @property
    def emoji(self) -> str:
        return self.monster_kind.emoji

    @property
    def colored_name(self) -> str:
        return self.monster_kind.colorize(self.display_name)


class Wolf(BaseMonster):
    """A wolf, hurt the same way by every weapon."""

    kind: Literal["WOLF"] = "WOLF"

    name: str = Field(
        description="The name of the wolf.",
    )
    health: HealthPoints = Field(
        description="The remaining health of the wolf.",
    )

    @property
    def display_name(self) -> str:
        return f"{self.name} the Wolf"


class Firelord(BaseMonster):
    """A firelord, resisting sticks and immune to fireballs."""

    kind: Literal["FIRELORD"] = "FIRELORD"

    name: str = Field(
        description="The name of the firelord.",
    )
    health: HealthPoints = Field(
        description="The remaining health of the firelord.",
    )

    @property
    def display_name(self) -> str:
        return f"{self.name} the Firelord"


class Ghost(BaseMonster):
    """A ghost. It has no health and cannot die."""

    kind: Literal["GHOST"] = "GHOST"


Monster = Annotated[Union[Wolf, Firelord, Ghost], Field(discriminator="kind")]

MONSTER_TYPES: dict[MonsterKind, type[BaseMonster]] = {
    MonsterKind.WOLF: Wolf,
    MonsterKind.FIRELORD: Firelord,
    MonsterKind.GHOST: Ghost,
}


def _check_monster_types() -> None:
    """
    Ensures the monster records and the kind enumeration describe the same
    closed set, and that the Monster union holds exactly those records,
    failing at import time otherwise.
    """
    for kind in MonsterKind:
        if kind not in MONSTER_TYPES:
            raise TypeError(f"Monster kind {kind} has no record class.")
    for kind, monster_type in MONSTER_TYPES.items():
        tag = monster_type.model_fields["kind"].default
        if tag != kind.value:
            raise TypeError(
                f"Record class {monster_type.__name__} is tagged '{tag}', "
                f"expected '{kind.value}'."
            )
    union_members = set(get_args(get_args(Monster)[0]))
    if union_members != set(MONSTER_TYPES.values()):
        raise TypeError(
            "Monster union and record classes differ: "
            f"{sorted(t.__name__ for t in union_members)} vs "
            f"{sorted(t.__name__ for t in MONSTER_TYPES.values())}."
        )


_check_monster_types()

_MONSTER_ADAPTER = TypeAdapter(Monster)


def parse_monster(data: dict[str, Any]) -> Monster:
    """
    Builds a monster from raw data, dispatching on its ``kind`` tag.

    Args:
        data (dict[str, Any]): The raw monster data, e.g.
            ``{"kind": "WOLF", "name": "Wilhelm", "health": 100}``.

    Raises:
        pydantic.ValidationError: If the tag is missing or unknown, or the
            fields do not match the tagged kind.

    Returns:
        Monster: The monster record.

    """
    return _MONSTER_ADAPTER.validate_python(data)



# Field values used to build a throwaway record of any kind.
_SAMPLE_FIELDS: dict[str, Any] = {"name": "Sample", "health": 1}


def sample_monster(monster_type: type[BaseMonster]) -> BaseMonster:
    """
    Builds a throwaway record of the given kind, filling only the fields that
    kind declares.
    """
    return monster_type.model_validate(
        {
            field: value
            for field, value in _SAMPLE_FIELDS.items()
            if field in monster_type.model_fields
        }
    )
