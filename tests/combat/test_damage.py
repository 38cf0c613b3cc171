"""
Tests for the damage computation.
"""

import pytest
from royale.character.character_builder import CharacterBuilder
from royale.combat.damage import (
    compute_base_damage,
    compute_damage,
    compute_final_damage,
)
from royale.core.battle_log import BattleLog
from royale.core.constants import MIN_DAMAGE


@pytest.fixture
def log():
    return BattleLog(echo=False)


def test_base_damage_adds_weapon(log):
    thrall = CharacterBuilder("orc", "Thrall", log).with_weapon("halberd").build()
    assert compute_base_damage(thrall) == 18 + 16


def test_base_damage_unarmed_is_strength(log):
    thrall = CharacterBuilder("orc", "Thrall", log).build()
    assert compute_base_damage(thrall) == 18


@pytest.mark.parametrize(
    "base, armor, final",
    [
        (34, 8, 26),
        (10, 0, 10),
        (9, 8, 1),
        (8, 8, MIN_DAMAGE),
        (10, 20, MIN_DAMAGE),
        (-5, 0, MIN_DAMAGE),
    ],
)
def test_final_damage_has_a_floor(base, armor, final):
    assert compute_final_damage(base, armor) == final


def test_breakdown_with_weapon(log):
    gimli = CharacterBuilder("dwarf", "Gimli", log).with_weapon("sword").build()
    legolas = CharacterBuilder("elf", "Legolas", log).with_armor().build()
    damage = compute_damage(gimli, legolas)
    assert damage.base == 32
    assert damage.armor == 8
    assert damage.final == 24
    assert damage.describe() == "Damage: 20 (strength) + 12 (Sword) = 32"


def test_breakdown_unarmed(log):
    gimli = CharacterBuilder("dwarf", "Gimli", log).build()
    legolas = CharacterBuilder("elf", "Legolas", log).build()
    damage = compute_damage(gimli, legolas)
    assert damage.weapon_name is None
    assert damage.weapon_damage == 0
    assert damage.final == 20
    assert damage.describe() == "Damage: 20 (strength) + 0 (unarmed) = 20"
