"""
Health points module for the simulator.

Defines the integer vitality quantity carried by monsters, together with the
arithmetic used by hit resolution.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HealthPoints(BaseModel):
    """
    A signed amount of health points.

    The value is truthy exactly when it is strictly positive, so a monster
    holding ``HealthPoints(value=0)`` is considered dead.
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(
        description="The amount of health points, may be negative",
    )

    @model_validator(mode="before")
    @classmethod
    def _wrap_plain_int(cls, data: Any) -> Any:
        """Allows a plain integer wherever health points are expected."""
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    @classmethod
    def of(cls, amount: "HealthPoints | int") -> "HealthPoints":
        """
        Coerces an amount into health points.

        Args:
            amount (HealthPoints | int): The amount to coerce.

        Returns:
            HealthPoints: The amount as health points.

        """
        if isinstance(amount, HealthPoints):
            return amount
        return cls(value=amount)

    def __bool__(self) -> bool:
        return self.value > 0

    def __add__(self, other: "HealthPoints") -> "HealthPoints":
        return HealthPoints(value=self.value + other.value)

    def __sub__(self, other: "HealthPoints") -> "HealthPoints":
        return HealthPoints(value=self.value - other.value)

    def __mul__(self, scalar: int) -> "HealthPoints":
        return HealthPoints(value=self.value * scalar)

    def __rmul__(self, scalar: int) -> "HealthPoints":
        return HealthPoints(value=scalar * self.value)

    def __truediv__(self, scalar: int) -> "HealthPoints":
        # Integer division truncating toward zero, not flooring.
        quotient = abs(self.value) // abs(scalar)
        if (self.value < 0) != (scalar < 0):
            quotient = -quotient
        return HealthPoints(value=quotient)

    def __str__(self) -> str:
        return str(self.value)


def max_health(lhs: HealthPoints, rhs: HealthPoints) -> HealthPoints:
    """Returns the larger of two health amounts."""
    return lhs if lhs.value >= rhs.value else rhs


# No health at all, the floor every reduction is clamped to.
NO_HEALTH = HealthPoints(value=0)


def clamp_reduce(health: HealthPoints, damage: HealthPoints) -> HealthPoints:
    """
    Reduces health by the given damage, never going below zero.

    Args:
        health (HealthPoints): The current health.
        damage (HealthPoints): The damage to subtract.

    Returns:
        HealthPoints: The remaining health, clamped to a floor of 0.

    """
    return max_health(NO_HEALTH, health - damage)
