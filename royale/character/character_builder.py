"""
Character builder module for the simulator.

Provides a fluent builder that creates a character from its race defaults and
applies optional overrides in any order before returning it.
"""

from catchery import log_warning

from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.constants import RaceKind, WeaponKind
from royale.items.weapon import create_weapon

from .character_race import get_race_stats, to_race_kind
from .main import Character


def create_character(race: RaceKind | str, name: str) -> Character:
    """
    Creates a character with the base stats of its race.

    Args:
        race (RaceKind | str):
            The race, or its case-insensitive name.
        name (str):
            The name of the character.

    Raises:
        UnknownRaceKind:
            If the race is not known.

    Returns:
        Character:
            The new character, unarmed and without armor.
    """
    kind = to_race_kind(race)
    stats = get_race_stats(kind)
    return Character(
        race=kind,
        name=name,
        health=stats.health,
        strength=stats.strength,
        dodge_chance=stats.dodge_chance,
    )


class CharacterBuilder:
    """
    Fluent builder for characters.

    Every `with_*` step changes the character being built and returns the
    builder, so steps can be chained in any order. Numeric overrides are not
    validated: out-of-range values only produce a diagnostic warning.

    Example:
        legolas = (
            CharacterBuilder("elf", "Legolas")
            .with_armor()
            .with_weapon("bow")
            .build()
        )
    """

    def __init__(
        self,
        race: RaceKind | str,
        name: str,
        log: BattleLog | None = None,
    ) -> None:
        self.log = BATTLE_LOG if log is None else log
        self.character = create_character(race, name)

    def with_health(self, health: int) -> "CharacterBuilder":
        """Sets both the current and the maximum health."""
        if health <= 0:
            log_warning(
                f"{self.character.name} starts with non-positive health",
                {"name": self.character.name, "health": health},
            )
        self.character.health = health
        self.character.max_health = health
        return self

    def with_strength(self, strength: int) -> "CharacterBuilder":
        """Sets the strength added to every attack."""
        self.character.strength = strength
        return self

    def with_dodge_chance(self, dodge_chance: int) -> "CharacterBuilder":
        """Sets the dodge chance, in percent."""
        if not 0 <= dodge_chance <= 100:
            log_warning(
                f"{self.character.name} has a dodge chance outside 0-100",
                {"name": self.character.name, "dodge_chance": dodge_chance},
            )
        self.character.dodge_chance = dodge_chance
        return self

    def with_weapon(self, weapon: WeaponKind | str) -> "CharacterBuilder":
        """
        Equips the weapon of the given kind.

        Raises:
            UnknownWeaponKind:
                If the weapon kind is not known.
        """
        self.character.take_weapon(create_weapon(weapon), self.log)
        return self

    def with_armor(self) -> "CharacterBuilder":
        """Equips a suit of iron armor."""
        self.character.put_on_armor(self.log)
        return self

    def build(self) -> Character:
        """Returns the configured character."""
        return self.character
