"""
Race module for the simulator.

Defines the base stats every race starts with and the lookup from a race kind,
or its name, to those stats.
"""

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field

from royale.core.constants import RaceKind
from royale.core.errors import UnknownRaceKind


class RaceStats(BaseModel):
    """
    Represents the base stats every member of a race starts with.
    """

    model_config = ConfigDict(frozen=True)

    health: int = Field(
        description="The starting and maximum health of the race",
    )
    strength: int = Field(
        description="The strength added to every attack",
    )
    dodge_chance: int = Field(
        description="The chance, in percent, to dodge an incoming attack",
    )


RACE_STATS: dict[RaceKind, RaceStats] = {
    RaceKind.ORC: RaceStats(health=115, strength=18, dodge_chance=5),
    RaceKind.DWARF: RaceStats(health=110, strength=20, dodge_chance=10),
    RaceKind.HUMAN: RaceStats(health=100, strength=15, dodge_chance=15),
    RaceKind.ELF: RaceStats(health=90, strength=14, dodge_chance=30),
}


def to_race_kind(race: RaceKind | str) -> RaceKind:
    """
    Converts a race given as a string into a RaceKind.

    Args:
        race (RaceKind | str):
            The race, or its case-insensitive name (e.g. "orc").

    Raises:
        UnknownRaceKind:
            If the value does not name a known race.

    Returns:
        RaceKind:
            The matching race.
    """
    if isinstance(race, RaceKind):
        return race
    if isinstance(race, str):
        try:
            return RaceKind(race.strip().lower())
        except ValueError:
            pass
    log_warning(
        f"Unknown race: {race}",
        {"race": race, "known": [k.value for k in RaceKind]},
    )
    raise UnknownRaceKind(race)


def get_race_stats(race: RaceKind | str) -> RaceStats:
    """Returns the base stats for the given race."""
    return RACE_STATS[to_race_kind(race)]
