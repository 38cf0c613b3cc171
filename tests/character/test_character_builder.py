"""
Tests for the character builder and the race stat table.
"""

import pytest
from royale.character.character_builder import CharacterBuilder, create_character
from royale.character.character_race import RACE_STATS, RaceStats
from royale.core.battle_log import BattleLog
from royale.core.constants import ARMOR_VALUE, RaceKind, WeaponKind
from royale.core.errors import UnknownRaceKind, UnknownWeaponKind


@pytest.fixture
def log():
    return BattleLog(echo=False)


@pytest.mark.parametrize(
    "race, health, strength, dodge",
    [
        ("orc", 115, 18, 5),
        ("dwarf", 110, 20, 10),
        ("human", 100, 15, 15),
        ("elf", 90, 14, 30),
    ],
)
def test_race_defaults(log, race, health, strength, dodge):
    character = CharacterBuilder(race, "Fighter", log).build()
    assert character.race == RaceKind(race)
    assert character.health == health
    assert character.max_health == health
    assert character.strength == strength
    assert character.dodge_chance == dodge
    assert character.weapon is None
    assert character.has_armor is False
    assert character.armor_value == 0
    assert character.dodge_count == 0


def test_race_table_covers_every_race():
    assert set(RACE_STATS) == set(RaceKind)


def test_race_stats_hold_only_numeric_stats():
    """The race itself is the table key, the rows only carry its numbers."""
    assert set(RaceStats.model_fields) == {"health", "strength", "dodge_chance"}


def test_race_accepts_enum_and_any_case(log):
    assert CharacterBuilder(RaceKind.ELF, "A", log).build().race == RaceKind.ELF
    assert CharacterBuilder("Elf", "B", log).build().race == RaceKind.ELF


def test_unknown_race_fails_immediately(log):
    with pytest.raises(UnknownRaceKind) as excinfo:
        CharacterBuilder("goblin", "Griblik", log)
    assert excinfo.value.race == "goblin"
    with pytest.raises(ValueError):
        create_character("troll", "Grunk")


def test_unknown_weapon_fails_immediately(log):
    builder = CharacterBuilder("human", "Boromir", log)
    with pytest.raises(UnknownWeaponKind):
        builder.with_weapon("trident")
    assert builder.build().weapon is None


def test_with_health_sets_current_and_max(log):
    character = CharacterBuilder("human", "Boromir", log).with_health(250).build()
    assert character.health == 250
    assert character.max_health == 250


def test_overrides_are_applied_in_any_order(log):
    first = (
        CharacterBuilder("dwarf", "Gimli", log)
        .with_weapon(WeaponKind.HALBERD)
        .with_strength(30)
        .with_armor()
        .with_dodge_chance(0)
        .with_health(42)
        .build()
    )
    second = (
        CharacterBuilder("dwarf", "Gimli", log)
        .with_health(42)
        .with_dodge_chance(0)
        .with_armor()
        .with_strength(30)
        .with_weapon("halberd")
        .build()
    )
    for character in (first, second):
        assert character.health == 42
        assert character.max_health == 42
        assert character.strength == 30
        assert character.dodge_chance == 0
        assert character.weapon is not None
        assert character.weapon.name == "Halberd"
        assert character.has_armor is True
        assert character.armor_value == ARMOR_VALUE


def test_every_step_returns_the_builder(log):
    builder = CharacterBuilder("orc", "Thrall", log)
    assert builder.with_health(10) is builder
    assert builder.with_strength(10) is builder
    assert builder.with_dodge_chance(10) is builder
    assert builder.with_weapon("bow") is builder
    assert builder.with_armor() is builder


def test_numeric_overrides_are_not_validated(log):
    character = (
        CharacterBuilder("elf", "Odd", log)
        .with_health(-5)
        .with_dodge_chance(150)
        .with_strength(-3)
        .build()
    )
    assert character.health == -5
    assert character.dodge_chance == 150
    assert character.strength == -3
    assert not character.is_alive()


def test_equipment_is_reported_to_the_battle_log(log):
    CharacterBuilder("orc", "Thrall", log).with_armor().with_weapon("halberd").build()
    assert log.get_logs() == [
        "Thrall put on iron armor [+8 defense]",
        "Thrall took Halberd [Damage: 16]",
    ]
