"""
Combat system module for the battle royale simulator.

This module resolves attacks, runs the rounds of a battle and reports the
statistics once it is over.
"""

from .attack import RandomSource, attack, roll_dodge
from .combat_manager import BattleResult, BattleRoyale
from .damage import (
    DamageBreakdown,
    compute_base_damage,
    compute_damage,
    compute_final_damage,
)
from .statistics import BattleStatistics, compute_statistics, show_statistics

__all__ = [
    # Import from attack.py
    "RandomSource",
    "attack",
    "roll_dodge",
    # Import from combat_manager.py
    "BattleResult",
    "BattleRoyale",
    # Import from damage.py
    "DamageBreakdown",
    "compute_base_damage",
    "compute_damage",
    "compute_final_damage",
    # Import from statistics.py
    "BattleStatistics",
    "compute_statistics",
    "show_statistics",
]
