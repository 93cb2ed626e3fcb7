"""
Main entry point for the monster fight simulator.

Builds a monster from the command line, fights it with the chosen weapon and
prints what happened.

Usage:
    monster-fight wolf --name Wilhelm --health 100 --weapon stick
    monster-fight firelord --weapon fireball --attempts 3 -v
    monster-fight ghost --weapon arrow --attempts 1000
"""

import argparse
import logging
from typing import Optional

from pydantic import ValidationError
from typing_extensions import assert_never

from monster_fight.combat.fight import FightResult, run_fight
from monster_fight.combat.resolver import HitOutcome
from monster_fight.core.constants import (
    DEFAULT_DAMAGE_PER_HIT,
    DEFAULT_MAX_ATTEMPTS,
    MonsterKind,
    Weapon,
)
from monster_fight.core.logging import setup_logging
from monster_fight.core.settings import FightSettings
from monster_fight.core.sheets import print_fight_report, print_hit, print_monster_sheet
from monster_fight.core.utils import crule
from monster_fight.monsters.monster import Firelord, Ghost, Monster, Wolf, parse_monster

# Names given to monsters when none is provided.
DEFAULT_NAMES = {
    MonsterKind.WOLF: "Wilhelm",
    MonsterKind.FIRELORD: "Gerhard",
}

DEFAULT_HEALTH = 100


def build_parser() -> argparse.ArgumentParser:
    """Creates the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="monster-fight",
        description="Fight a monster until it dies or you give up.",
    )
    parser.add_argument(
        "kind",
        type=str.upper,
        choices=[kind.value for kind in MonsterKind],
        help="The kind of monster to fight",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="The name of the monster (ignored for ghosts)",
    )
    parser.add_argument(
        "--health",
        type=int,
        default=DEFAULT_HEALTH,
        help=f"The starting health of the monster (default: {DEFAULT_HEALTH})",
    )
    parser.add_argument(
        "--weapon",
        type=str.upper,
        choices=[weapon.value for weapon in Weapon],
        default=Weapon.STICK.value,
        help="The weapon to strike with (default: STICK)",
    )
    parser.add_argument(
        "--damage",
        type=int,
        default=DEFAULT_DAMAGE_PER_HIT,
        help=f"The damage of every strike (default: {DEFAULT_DAMAGE_PER_HIT})",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help=f"The maximum number of strikes (default: {DEFAULT_MAX_ATTEMPTS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Show every strike (-v) and debug logging (-vv)",
    )
    return parser


def build_monster(kind: MonsterKind, name: Optional[str], health: int) -> Monster:
    """
    Creates the monster to fight.

    Args:
        kind (MonsterKind): The kind of monster.
        name (Optional[str]): Its name, or None for the default one.
        health (int): Its starting health.

    Returns:
        Monster: The new monster.

    """
    match kind:
        case MonsterKind.WOLF | MonsterKind.FIRELORD:
            return parse_monster(
                {
                    "kind": kind.value,
                    "name": name or DEFAULT_NAMES[kind],
                    "health": health,
                }
            )
        case MonsterKind.GHOST:
            return parse_monster({"kind": kind.value})
        case _:
            assert_never(kind)


def fight(monster: Monster, weapon: Weapon, settings: FightSettings) -> FightResult:
    """
    Runs a fight, printing every strike when verbose.

    Args:
        monster (Monster): The monster to fight.
        weapon (Weapon): The weapon to strike with.
        settings (FightSettings): The fight parameters.

    Returns:
        FightResult: The outcome of the fight.

    """
    match monster:
        case Wolf() | Firelord():
            starting_value = monster.health.value
        case Ghost():
            starting_value = 0
        case _:
            assert_never(monster)

    def on_hit(attempt: int, outcome: HitOutcome) -> None:
        print_hit(attempt, outcome, weapon, starting_value)

    return run_fight(
        monster,
        weapon,
        damage_per_hit=settings.damage_per_hit,
        max_attempts=settings.max_attempts,
        on_hit=on_hit if settings.verbose >= 1 else None,
        record_narration=False,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """
    Runs the simulator from the command line.

    Args:
        argv (Optional[list[str]]): The arguments, defaults to sys.argv.

    Returns:
        int: The exit code.

    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = FightSettings(
            damage_per_hit=args.damage,
            max_attempts=args.attempts,
            verbose=min(args.verbose, 2),
        )
    except ValidationError as e:
        parser.error(str(e))

    setup_logging(logging.DEBUG if settings.verbose >= 2 else logging.WARNING)

    monster = build_monster(MonsterKind(args.kind), args.name, args.health)
    weapon = Weapon(args.weapon)

    crule(":crossed_swords:  Fight Started", style="bold green")
    print_monster_sheet(monster)
    result = fight(monster, weapon, settings)
    crule(":crossed_swords:  Fight Finished", style="bold green")
    print_fight_report(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
