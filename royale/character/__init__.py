"""
Character system module for the battle royale simulator.

This module handles character creation and state: the race stat table, the
character itself, its display helpers and the fluent builder.
"""

from .character_builder import CharacterBuilder, create_character
from .character_display import CharacterDisplay
from .character_race import RACE_STATS, RaceStats, get_race_stats, to_race_kind
from .main import Character

__all__ = [
    # Import from character_builder.py
    "CharacterBuilder",
    "create_character",
    # Import from character_display.py
    "CharacterDisplay",
    # Import from character_race.py
    "RACE_STATS",
    "RaceStats",
    "get_race_stats",
    "to_race_kind",
    # Import from main.py
    "Character",
]
