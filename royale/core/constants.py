"""
Constants and enumerations for the simulator.

Defines global constants and the enumerations for race and weapon kinds used
throughout the simulator.
"""

from enum import Enum

# Global verbose level for the diagnostic logger:
# 0 - Minimal (warnings only)
# 1 - Moderate (round summaries)
# 2 - Full detail (every attack resolution)
GLOBAL_VERBOSE_LEVEL = 0

# Defense granted by a suit of iron armor.
ARMOR_VALUE = 8

# Every attack that is not dodged deals at least this much damage.
MIN_DAMAGE = 1

# Upper bound (exclusive) of the dodge roll.
DODGE_ROLL_MAX = 100

# Dodge chance of a character that is not created from the race table.
DEFAULT_DODGE_CHANCE = 20


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class RaceKind(NiceEnum):
    """Defines the playable races."""

    ORC = "orc"
    DWARF = "dwarf"
    HUMAN = "human"
    ELF = "elf"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this race."""
        return {
            RaceKind.ORC: "👹",
            RaceKind.DWARF: "⛏️",
            RaceKind.HUMAN: "👤",
            RaceKind.ELF: "🧝",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this race."""
        return {
            RaceKind.ORC: "bold green",
            RaceKind.DWARF: "bold yellow",
            RaceKind.HUMAN: "bold blue",
            RaceKind.ELF: "bold cyan",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies race color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class WeaponKind(NiceEnum):
    """Defines the kinds of weapons a character can pick up."""

    SWORD = "sword"
    HALBERD = "halberd"
    BOW = "bow"
