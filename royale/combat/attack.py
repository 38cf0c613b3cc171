"""
Attack resolution module for the simulator.

Resolves a single attack of one character against another: the dodge check,
the damage computation and the resulting change of the defender's health.
"""

import random
from typing import Protocol

from royale.character.main import Character
from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.constants import DODGE_ROLL_MAX
from royale.core.logging import log_debug

from .damage import compute_damage


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1), like random.Random."""

    def random(self) -> float: ...


def roll_dodge(
    defender: Character,
    rng: RandomSource | None = None,
    log: BattleLog | None = None,
) -> bool:
    """
    Performs the defender's dodge check.

    A value is drawn uniformly in [0, DODGE_ROLL_MAX); the attack is dodged if
    it is less than or equal to the defender's dodge chance.

    Args:
        defender (Character):
            The character trying to dodge.
        rng (RandomSource | None):
            The random source. Defaults to the `random` module.
        log (BattleLog | None):
            The battle log to report to. Defaults to the shared log.

    Returns:
        bool:
            True if the attack was dodged.

    """
    rng = random if rng is None else rng
    log = BATTLE_LOG if log is None else log

    roll = rng.random() * DODGE_ROLL_MAX
    if roll <= defender.dodge_chance:
        defender.dodge_count += 1
        log.log(f"✨ {defender.name} dodged the attack!")
        return True
    return False


def attack(
    attacker: Character,
    defender: Character,
    log: BattleLog | None = None,
    rng: RandomSource | None = None,
) -> None:
    """
    Resolves one attack of the attacker against the defender.

    Nothing happens if either character is already dead. Otherwise the
    defender tries to dodge; if that fails, the damage is subtracted from the
    defender's health, which may go below zero.

    Args:
        attacker (Character):
            The attacking character.
        defender (Character):
            The defending character.
        log (BattleLog | None):
            The battle log to report to. Defaults to the shared log.
        rng (RandomSource | None):
            The random source for the dodge check. Defaults to the `random`
            module.

    """
    if not attacker.is_alive() or not defender.is_alive():
        return

    log = BATTLE_LOG if log is None else log

    if roll_dodge(defender, rng, log):
        return

    damage = compute_damage(attacker, defender)
    defender.health -= damage.final

    log.log(f"{attacker.name} attacks {defender.name}!")
    log.log(damage.describe())
    log.log(f"Armor neutralizes: {damage.armor}")
    log.log(f"{defender.name} takes {damage.final} damage!")
    log.log(
        f"{defender.name} health: {defender.display_health}/{defender.max_health}"
    )
    if not defender.is_alive():
        log.log(f"💀 {defender.name} has fallen in battle!")
    log.log("---")

    log_debug(
        f"{attacker.name} hit {defender.name} for {damage.final}",
        {"base": damage.base, "armor": damage.armor, "health": defender.health},
    )
