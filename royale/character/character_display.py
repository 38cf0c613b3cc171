"""
Character display module for the simulator.

Provides display functionality for characters: health bars and the one-line
status shown in the roster before a battle starts.
"""

from typing import Any

from royale.core.utils import make_bar


class CharacterDisplay:
    """
    Handles display and formatting for Character objects.

    Attributes:
        owner (Any):
            The Character instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def get_health_bar(self, length: int = 10) -> str:
        """
        Returns a health bar colored by how much health is left.

        Args:
            length (int): The length of the bar in characters. Defaults to 10.

        Returns:
            str: The rich-formatted health bar.

        """
        health = self.owner.display_health
        maximum = self.owner.max_health
        ratio = health / maximum if maximum > 0 else 0
        if ratio > 0.5:
            color = "green"
        elif ratio > 0.25:
            color = "yellow"
        else:
            color = "red"
        return make_bar(health, maximum, length=length, color=color)

    def get_status_line(self, show_bars: bool = False) -> str:
        """
        Get a formatted status line for the character.

        Args:
            show_bars (bool): Whether to show the health bar. Defaults to False.

        Returns:
            str: A rich-formatted string with race, name, health and gear.

        """
        owner = self.owner
        name_width = min(max(len(owner.name), 8), 16)
        status = f"{owner.race.emoji} [bold]{owner.name:<{name_width}}[/] "
        status += f"{owner.race.colored_name} "
        if show_bars:
            status += f"{self.get_health_bar()} "
        status += f"HP: [green]{owner.display_health:>3}[/]/{owner.max_health:<3} "
        status += f"STR: {owner.strength:>2} "
        status += f"DODGE: {owner.dodge_chance:>2}% "
        if owner.weapon is not None:
            status += f"| {owner.weapon.name} ({owner.weapon.damage}) "
        if owner.has_armor:
            status += f"| Armor (+{owner.armor_value})"
        return status.rstrip()
