"""
Tests for the weapon catalog.
"""

import pytest
from pydantic import ValidationError
from royale.core.constants import WeaponKind
from royale.core.errors import SimulatorError, UnknownWeaponKind
from royale.items.weapon import WEAPON_CATALOG, Weapon, create_weapon


@pytest.mark.parametrize(
    "kind, name, damage",
    [
        (WeaponKind.SWORD, "Sword", 12),
        (WeaponKind.HALBERD, "Halberd", 16),
        (WeaponKind.BOW, "Bow", 10),
    ],
)
def test_catalog_values(kind, name, damage):
    weapon = create_weapon(kind)
    assert weapon.name == name
    assert weapon.damage == damage


def test_catalog_covers_every_kind():
    assert set(WEAPON_CATALOG) == set(WeaponKind)


@pytest.mark.parametrize("kind", ["sword", "SWORD", " Sword "])
def test_create_weapon_from_string(kind):
    assert create_weapon(kind) == WEAPON_CATALOG[WeaponKind.SWORD]


@pytest.mark.parametrize("kind", ["axe", "", 42, None])
def test_unknown_weapon_kind(kind):
    with pytest.raises(UnknownWeaponKind) as excinfo:
        create_weapon(kind)
    assert excinfo.value.weapon == kind
    assert isinstance(excinfo.value, SimulatorError)
    assert isinstance(excinfo.value, ValueError)


def test_weapons_are_immutable():
    weapon = Weapon(name="Club", damage=5)
    with pytest.raises(ValidationError):
        weapon.damage = 50
