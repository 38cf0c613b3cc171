"""
Character management module for the simulator.

Defines the Character class: a mutable combat unit holding its current stats,
equipped weapon, armor state and dodge tally.
"""

from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.constants import ARMOR_VALUE, DEFAULT_DODGE_CHANCE, RaceKind
from royale.items.weapon import Weapon

from .character_display import CharacterDisplay


class Character:
    """
    Represents a fighter in the battle royale.

    Attributes:
        race (RaceKind):
            The race of the character.
        name (str):
            The name of the character. Names are not required to be unique.
        health (int):
            The current health. It only decreases, and may drop below zero
            internally; use `display_health` to show it.
        max_health (int):
            The health the character started the battle with.
        strength (int):
            The strength added to every attack.
        weapon (Weapon | None):
            The equipped weapon, if any.
        has_armor (bool):
            Whether the character wears armor.
        armor_value (int):
            The damage neutralized by the armor on every hit taken.
        dodge_chance (int):
            The chance, in percent, to dodge an incoming attack.
        dodge_count (int):
            The number of attacks dodged so far.

    """

    race: RaceKind
    name: str
    health: int
    max_health: int
    strength: int
    weapon: Weapon | None
    has_armor: bool
    armor_value: int
    dodge_chance: int
    dodge_count: int

    display: CharacterDisplay

    def __init__(
        self,
        race: RaceKind,
        name: str,
        health: int,
        strength: int,
        dodge_chance: int = DEFAULT_DODGE_CHANCE,
    ) -> None:
        self.race = race
        self.name = name
        self.health = health
        self.max_health = health
        self.strength = strength
        self.weapon = None
        self.has_armor = False
        self.armor_value = 0
        self.dodge_chance = dodge_chance
        self.dodge_count = 0

        self.display = CharacterDisplay(owner=self)

    @property
    def display_health(self) -> int:
        """Returns the current health, clamped at zero."""
        return max(self.health, 0)

    def put_on_armor(self, log: BattleLog | None = None) -> None:
        """
        Equips a suit of iron armor.

        Args:
            log (BattleLog | None):
                The battle log to report to. Defaults to the shared log.

        """
        log = BATTLE_LOG if log is None else log
        self.has_armor = True
        self.armor_value = ARMOR_VALUE
        log.log(f"{self.name} put on iron armor [+{self.armor_value} defense]")

    def take_weapon(self, weapon: Weapon, log: BattleLog | None = None) -> None:
        """
        Equips the given weapon, replacing the current one.

        Args:
            weapon (Weapon):
                The weapon to wield.
            log (BattleLog | None):
                The battle log to report to. Defaults to the shared log.

        """
        log = BATTLE_LOG if log is None else log
        self.weapon = weapon
        log.log(f"{self.name} took {weapon.name} [Damage: {weapon.damage}]")

    def is_alive(self) -> bool:
        """
        Checks if the character is alive (health > 0).

        Returns:
            bool:
                True if the character is alive, False otherwise

        """
        return self.health > 0

    def is_dead(self) -> bool:
        """
        Checks if the character is dead (health <= 0).

        Returns:
            bool:
                True if the character is dead, False otherwise

        """
        return self.health <= 0

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', race={self.race}, "
            f"health={self.health}/{self.max_health})"
        )
