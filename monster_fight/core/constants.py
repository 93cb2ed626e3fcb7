"""
Constants and enumerations for the monster fight simulator.

Defines the default fight parameters and the closed enumerations for weapons
and monster kinds used throughout the simulator.
"""

from enum import Enum

# Global verbose level for fight output:
# 0 - Minimal (e.g., only the final report)
# 1 - Moderate (e.g., narration of every strike)
# 2 - Full detail (e.g., health bars and debug logging)
GLOBAL_VERBOSE_LEVEL = 0

# Damage dealt by every strike of a fight, unless told otherwise.
DEFAULT_DAMAGE_PER_HIT = 40

# Number of strikes attempted before giving up on a monster.
DEFAULT_MAX_ATTEMPTS = 5


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class Weapon(NiceEnum):
    """Defines the weapons a monster can be struck with."""

    STICK = "STICK"
    ARROW = "ARROW"
    FIREBALL = "FIREBALL"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this weapon."""
        return {
            Weapon.STICK: "🪵",
            Weapon.ARROW: "🏹",
            Weapon.FIREBALL: "🔥",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this weapon."""
        return {
            Weapon.STICK: "bold yellow",
            Weapon.ARROW: "bold cyan",
            Weapon.FIREBALL: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies weapon color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class MonsterKind(NiceEnum):
    """Defines the closed set of monster kinds that can be fought."""

    WOLF = "WOLF"
    FIRELORD = "FIRELORD"
    GHOST = "GHOST"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this monster kind."""
        return {
            MonsterKind.WOLF: "🐺",
            MonsterKind.FIRELORD: "👹",
            MonsterKind.GHOST: "👻",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this monster kind."""
        return {
            MonsterKind.WOLF: "bold white",
            MonsterKind.FIRELORD: "bold red",
            MonsterKind.GHOST: "dim white",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies monster kind color formatting to a message."""
        return f"[{self.color}]{message}[/]"
