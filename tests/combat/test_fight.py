"""
Tests for the fight loop.
"""

import pytest

from monster_fight.combat.fight import FightResult, run_fight
from monster_fight.combat.resolver import HitOutcome, is_dead
from monster_fight.core.constants import Weapon
from monster_fight.monsters.monster import Firelord, Ghost, Wolf


@pytest.fixture
def wilhelm():
    return Wolf(name="Wilhelm", health=100)


@pytest.fixture
def gerhard():
    return Firelord(name="Gerhard", health=100)


@pytest.fixture
def astrid():
    return Ghost()


def test_wilhelm_the_wolf_dies_in_3_attempts(wilhelm):
    result = run_fight(wilhelm, Weapon.STICK)

    assert result.attempts == 3
    assert result.dead
    assert is_dead(result.monster)
    assert result.monster.health.value == 0


def test_gerhard_the_firelord_dies_in_5_attempts_when_using_sticks(gerhard):
    result = run_fight(gerhard, Weapon.STICK)

    assert result.attempts == 5
    assert result.dead
    assert not result.exhausted


def test_ghosts_cannot_be_killed(astrid):
    result = run_fight(astrid, Weapon.ARROW)

    assert result.attempts == 5
    assert not result.dead
    assert result.exhausted


def test_ghosts_cannot_be_killed_with_a_large_budget(astrid):
    result = run_fight(astrid, Weapon.ARROW, max_attempts=1000)

    assert result.attempts == 1000
    assert not is_dead(result.monster)
    assert len(result.narration) == 1000


def test_firelord_survives_fireballs(gerhard):
    result = run_fight(gerhard, Weapon.FIREBALL)

    assert result.attempts == 5
    assert result.monster == gerhard
    assert result.exhausted


def test_firelord_dies_faster_to_arrows(gerhard):
    assert run_fight(gerhard, Weapon.ARROW).attempts == 3


def test_fight_stops_on_first_lethal_strike():
    result = run_fight(Wolf(name="Pup", health=0), Weapon.ARROW)
    assert result.attempts == 1
    assert result.dead
    assert len(result.narration) == 1


def test_budget_of_one_strikes_once(wilhelm):
    result = run_fight(wilhelm, Weapon.ARROW, max_attempts=1)
    assert result.attempts == 1
    assert result.monster.health.value == 60
    assert not result.dead


def test_zero_damage_never_kills(wilhelm):
    result = run_fight(wilhelm, Weapon.ARROW, damage_per_hit=0)
    assert result.attempts == 5
    assert result.monster == wilhelm


def test_custom_damage(wilhelm):
    result = run_fight(wilhelm, Weapon.ARROW, damage_per_hit=100)
    assert result.attempts == 1
    assert result.dead


def test_fight_does_not_mutate_input(wilhelm):
    run_fight(wilhelm, Weapon.STICK)
    assert wilhelm.health.value == 100


def test_result_records_fight_parameters(wilhelm):
    result = run_fight(wilhelm, Weapon.ARROW, damage_per_hit=30, max_attempts=7)
    assert isinstance(result, FightResult)
    assert result.weapon is Weapon.ARROW
    assert result.damage_per_hit == 30
    assert result.max_attempts == 7
    assert result.attempts == 4
    assert result.narration == [
        "Wilhelm the wolf growls as it takes 30 damage from the hit."
    ] * 4


def test_on_hit_is_called_for_every_strike(mocker, wilhelm):
    on_hit = mocker.Mock()
    run_fight(wilhelm, Weapon.STICK, on_hit=on_hit)

    assert on_hit.call_count == 3
    attempts = [call.args[0] for call in on_hit.call_args_list]
    assert attempts == [1, 2, 3]
    outcome = on_hit.call_args_list[0].args[1]
    assert isinstance(outcome, HitOutcome)
    assert outcome.monster.health.value == 60


def test_fight_is_logged(mocker, wilhelm):
    log_debug = mocker.patch("monster_fight.combat.fight.log_debug")
    log_info = mocker.patch("monster_fight.combat.fight.log_info")
    run_fight(wilhelm, Weapon.STICK)

    log_debug.assert_called_once()
    log_info.assert_called_once()
    _, context = log_info.call_args.args
    assert context["attempts"] == 3
    assert context["dead"] is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_attempts": 0},
        {"max_attempts": -1},
        {"damage_per_hit": -40},
        {"damage_per_hit": 2.5},
    ],
)
def test_invalid_parameters_are_rejected(mocker, wilhelm, kwargs):
    log_critical = mocker.patch("monster_fight.core.validation.log_critical")
    with pytest.raises(ValueError):
        run_fight(wilhelm, Weapon.STICK, **kwargs)
    log_critical.assert_called_once()


def test_invalid_weapon_is_rejected(mocker, wilhelm):
    mocker.patch("monster_fight.core.validation.log_critical")
    with pytest.raises(ValueError):
        run_fight(wilhelm, "STICK")  # type: ignore[arg-type]


def test_narration_can_be_left_out_of_long_fights(mocker, astrid):
    on_hit = mocker.Mock()
    result = run_fight(
        astrid, Weapon.ARROW, max_attempts=1000, on_hit=on_hit, record_narration=False
    )

    assert result.attempts == 1000
    assert result.narration == []
    assert on_hit.call_count == 1000
