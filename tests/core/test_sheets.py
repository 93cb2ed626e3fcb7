"""
Tests for the monster sheets, the fight report and the display helpers.
"""

import pytest
from rich.console import Console
from rich.table import Table

from monster_fight.combat.fight import run_fight
from monster_fight.combat.resolver import resolve_hit
from monster_fight.core.constants import Weapon
from monster_fight.core.sheets import (
    monster_health_to_string,
    print_fight_report,
    print_hit,
    print_monster_sheet,
)
from monster_fight.core.utils import make_bar
from monster_fight.monsters.monster import Firelord, Ghost, Wolf


@pytest.fixture
def cprint(mocker):
    return mocker.patch("monster_fight.core.sheets.cprint")


def test_make_bar():
    assert make_bar(5, 10, length=4) == "[white]▮▮[dim white]▯▯[/][/]"
    assert make_bar(10, 10, length=4) == "[white]▮▮▮▮[/]"
    assert make_bar(0, 10, length=2, color="red") == "[red][dim white]▯▯[/][/]"


def test_make_bar_handles_odd_health():
    assert make_bar(5, 0, length=2) == "[white][dim white]▯▯[/][/]"
    assert make_bar(-5, 10, length=2) == "[white][dim white]▯▯[/][/]"
    assert make_bar(20, 10, length=2) == "[white]▮▮[/]"


def test_monster_health_to_string():
    wolf = Wolf(name="Wilhelm", health=60)
    assert monster_health_to_string(wolf, 100).endswith("60/100")
    assert "bold green" in monster_health_to_string(wolf, 100)
    dead = Firelord(name="Gerhard", health=0)
    assert "bold red" in monster_health_to_string(dead, 100)
    assert monster_health_to_string(Ghost(), 0) == "[dim white]∞[/]"


def test_print_monster_sheet(cprint):
    print_monster_sheet(Wolf(name="Wilhelm", health=100))
    assert "100 HP" in cprint.call_args.args[0]
    print_monster_sheet(Ghost())
    assert "immortal" in cprint.call_args.args[0]


def test_print_hit(cprint):
    outcome = resolve_hit(Wolf(name="Wilhelm", health=100), Weapon.ARROW, 40)
    print_hit(1, outcome, Weapon.ARROW, 100)
    line = cprint.call_args.args[0]
    assert "#1" in line
    assert outcome.narration in line


def test_print_fight_report(cprint):
    result = run_fight(Ghost(), Weapon.FIREBALL)
    print_fight_report(result)
    table = cprint.call_args.args[0]
    assert isinstance(table, Table)
    assert table.row_count == 1
    console = Console(width=120)
    with console.capture() as capture:
        console.print(table)
    assert "Survived" in capture.get()


def test_sheets_reject_unknown_monsters(cprint):
    with pytest.raises(AssertionError):
        monster_health_to_string(object(), 100)  # type: ignore[arg-type]
    cprint.assert_not_called()
