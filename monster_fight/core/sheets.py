"""
Module for printing monsters and fight reports in a formatted way.
"""

from rich.table import Table
from typing_extensions import assert_never

from monster_fight.combat.fight import FightResult
from monster_fight.combat.resolver import HitOutcome, is_dead
from monster_fight.monsters.monster import Firelord, Ghost, Monster, Wolf

from .constants import Weapon
from .utils import cprint, make_bar


def monster_health_to_string(monster: Monster, starting_health: int) -> str:
    """
    Formats the health of a monster as a bar followed by the raw value.

    Args:
        monster (Monster): The monster to describe.
        starting_health (int): The health the monster started the fight with.

    Returns:
        str: The formatted health, or an infinity sign for ghosts.

    """
    match monster:
        case Wolf() | Firelord():
            color = "bold red" if is_dead(monster) else "bold green"
            bar = make_bar(monster.health.value, starting_health, color=color)
            return f"{bar} {monster.health.value}/{starting_health}"
        case Ghost():
            return "[dim white]∞[/]"
        case _:
            assert_never(monster)


def print_monster_sheet(monster: Monster, padding: int = 2) -> None:
    """
    Prints the details of a monster in a formatted way.

    Args:
        monster (Monster): The monster to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    sheet = f"{monster.emoji} {monster.colored_name}"
    match monster:
        case Wolf() | Firelord():
            sheet += f", {monster.health.value} HP"
        case Ghost():
            sheet += ", immortal"
        case _:
            assert_never(monster)
    cprint(" " * padding + sheet)


def print_hit(attempt: int, outcome: HitOutcome, weapon: Weapon, starting_health: int) -> None:
    """
    Prints the narration of a single strike.

    Args:
        attempt (int): The attempt number of the strike.
        outcome (HitOutcome): The outcome of the strike.
        weapon (Weapon): The weapon used.
        starting_health (int): The health the monster started the fight with.

    """
    cprint(
        f"    [bold]#{attempt}[/] {weapon.emoji} {outcome.narration} "
        f"{monster_health_to_string(outcome.monster, starting_health)}"
    )


def print_fight_report(result: FightResult) -> None:
    """
    Prints a summary table of a fight.

    Args:
        result (FightResult): The outcome of the fight.

    """
    table = Table(title="Fight Report", show_header=True, header_style="bold cyan")
    table.add_column("Monster")
    table.add_column("Weapon")
    table.add_column("Damage", justify="right")
    table.add_column("Attempts", justify="right")
    table.add_column("Outcome")

    if result.dead:
        outcome = "[bold red]Dead[/]"
    else:
        outcome = "[bold yellow]Survived[/]"

    table.add_row(
        f"{result.monster.emoji} {result.monster.colored_name}",
        f"{result.weapon.emoji} {result.weapon.colored_name}",
        str(result.damage_per_hit),
        f"{result.attempts}/{result.max_attempts}",
        outcome,
    )
    cprint(table)
