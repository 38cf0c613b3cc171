"""
Damage module for the simulator.

Handles damage calculation: the base damage of an attacker, the armor
neutralization of the defender and the damage floor.
"""

from typing import Any

from pydantic import BaseModel, Field

from royale.core.constants import MIN_DAMAGE


class DamageBreakdown(BaseModel):
    """Represents how the damage of a single hit was computed.

    The base damage is the attacker's strength plus the damage of its weapon;
    the final damage is the base minus the defender's armor, never lower than
    MIN_DAMAGE.
    """

    strength: int = Field(
        description="The strength of the attacker.",
    )
    weapon_name: str | None = Field(
        default=None,
        description="The name of the attacker's weapon, if any.",
    )
    weapon_damage: int = Field(
        default=0,
        description="The damage added by the weapon, 0 when unarmed.",
    )
    base: int = Field(
        description="The damage before armor.",
    )
    armor: int = Field(
        description="The damage neutralized by the defender's armor.",
    )
    final: int = Field(
        description="The damage dealt to the defender.",
    )

    def describe(self) -> str:
        """
        Returns the damage formula as a log line.

        Returns:
            str:
                The formula, e.g. "Damage: 18 (strength) + 16 (Halberd) = 34".

        """
        weapon_name = self.weapon_name or "unarmed"
        return (
            f"Damage: {self.strength} (strength) + "
            f"{self.weapon_damage} ({weapon_name}) = {self.base}"
        )


def compute_base_damage(attacker: Any) -> int:
    """Returns the attacker's strength plus the damage of its weapon."""
    weapon_damage = attacker.weapon.damage if attacker.weapon is not None else 0
    return attacker.strength + weapon_damage


def compute_final_damage(base: int, armor: int) -> int:
    """
    Applies armor neutralization and the damage floor.

    Args:
        base (int):
            The damage before armor.
        armor (int):
            The armor value of the defender.

    Returns:
        int:
            The damage dealt, at least MIN_DAMAGE.

    """
    return max(base - armor, MIN_DAMAGE)


def compute_damage(attacker: Any, defender: Any) -> DamageBreakdown:
    """
    Computes the damage the attacker deals to the defender on a hit.

    Args:
        attacker (Any):
            The attacking character.
        defender (Any):
            The defending character.

    Returns:
        DamageBreakdown:
            The full computation, ready to be logged.

    """
    base = compute_base_damage(attacker)
    weapon = attacker.weapon
    return DamageBreakdown(
        strength=attacker.strength,
        weapon_name=weapon.name if weapon is not None else None,
        weapon_damage=weapon.damage if weapon is not None else 0,
        base=base,
        armor=defender.armor_value,
        final=compute_final_damage(base, defender.armor_value),
    )
