"""
Core system module for the battle royale simulator.

This module contains the fundamental components shared by the rest of the
simulator: constants, errors, the battle log and console utilities.
"""

from .battle_log import BATTLE_LOG, BattleLog
from .constants import (
    ARMOR_VALUE,
    DEFAULT_DODGE_CHANCE,
    DODGE_ROLL_MAX,
    MIN_DAMAGE,
    RaceKind,
    WeaponKind,
)
from .errors import SimulatorError, UnknownRaceKind, UnknownWeaponKind
from .utils import cprint, cprint_verbatim, crule, make_bar

__all__ = [
    # Import from battle_log.py
    "BATTLE_LOG",
    "BattleLog",
    # Import from constants.py
    "ARMOR_VALUE",
    "DEFAULT_DODGE_CHANCE",
    "DODGE_ROLL_MAX",
    "MIN_DAMAGE",
    "RaceKind",
    "WeaponKind",
    # Import from errors.py
    "SimulatorError",
    "UnknownRaceKind",
    "UnknownWeaponKind",
    # Import from utils.py
    "cprint",
    "cprint_verbatim",
    "crule",
    "make_bar",
]
