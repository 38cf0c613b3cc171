"""
Items module for the battle royale simulator.

Contains the weapon catalog.
"""

from .weapon import WEAPON_CATALOG, Weapon, create_weapon, to_weapon_kind

__all__ = [
    "WEAPON_CATALOG",
    "Weapon",
    "create_weapon",
    "to_weapon_kind",
]
