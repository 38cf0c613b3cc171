"""
Weapon module for the simulator.

Defines the Weapon model and the catalog mapping each weapon kind to its fixed
name and damage.
"""

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field

from royale.core.constants import WeaponKind
from royale.core.errors import UnknownWeaponKind


class Weapon(BaseModel):
    """
    Represents a weapon that can be wielded by characters in combat.

    Weapons are immutable values: the damage they add to an attack never
    changes, so the same instance can be handed to several characters.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the weapon.",
    )
    damage: int = Field(
        description="The damage this weapon adds to the wielder's strength.",
    )

    def __str__(self) -> str:
        return self.name


WEAPON_CATALOG: dict[WeaponKind, Weapon] = {
    WeaponKind.SWORD: Weapon(name="Sword", damage=12),
    WeaponKind.HALBERD: Weapon(name="Halberd", damage=16),
    WeaponKind.BOW: Weapon(name="Bow", damage=10),
}


def to_weapon_kind(kind: WeaponKind | str) -> WeaponKind:
    """
    Converts a weapon kind given as a string into a WeaponKind.

    Args:
        kind (WeaponKind | str):
            The weapon kind, or its case-insensitive name (e.g. "sword").

    Raises:
        UnknownWeaponKind:
            If the kind does not name a known weapon.

    Returns:
        WeaponKind:
            The matching weapon kind.
    """
    if isinstance(kind, WeaponKind):
        return kind
    if isinstance(kind, str):
        try:
            return WeaponKind(kind.strip().lower())
        except ValueError:
            pass
    log_warning(
        f"Unknown weapon type: {kind}",
        {"weapon": kind, "known": [k.value for k in WeaponKind]},
    )
    raise UnknownWeaponKind(kind)


def create_weapon(kind: WeaponKind | str) -> Weapon:
    """
    Returns the weapon for the given kind.

    Args:
        kind (WeaponKind | str):
            The weapon kind, or its case-insensitive name.

    Raises:
        UnknownWeaponKind:
            If the kind does not name a known weapon.

    Returns:
        Weapon:
            The catalog weapon.
    """
    return WEAPON_CATALOG[to_weapon_kind(kind)]
