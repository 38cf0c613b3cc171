"""
Battle royale simulator.

Characters built from race defaults, optionally armed and armored, fight an
all-against-all battle until at most one of them is left standing.
"""

from .core import (
    BATTLE_LOG,
    BattleLog,
    RaceKind,
    SimulatorError,
    UnknownRaceKind,
    UnknownWeaponKind,
    WeaponKind,
)
from .items import Weapon, create_weapon
from .character import Character, CharacterBuilder, create_character
from .combat import BattleResult, BattleRoyale, BattleStatistics, attack

__all__ = [
    "BATTLE_LOG",
    "BattleLog",
    "BattleResult",
    "BattleRoyale",
    "BattleStatistics",
    "Character",
    "CharacterBuilder",
    "RaceKind",
    "SimulatorError",
    "UnknownRaceKind",
    "UnknownWeaponKind",
    "Weapon",
    "WeaponKind",
    "attack",
    "create_character",
    "create_weapon",
]
