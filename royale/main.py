"""
Main entry point for the battle royale simulator.

Builds the demo roster (an orc, a dwarf, a human and an elf, all armored and
armed), runs the battle and prints the full battle log once it is over.
"""

from royale.character import Character, CharacterBuilder
from royale.combat import BattleRoyale
from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.logging import setup_logging
from royale.core.utils import cprint, cprint_verbatim, crule


def build_demo_roster(log: BattleLog) -> list[Character]:
    """
    Builds the four demo fighters.

    Args:
        log (BattleLog): The battle log equipment changes are reported to.

    Returns:
        list[Character]: The fighters, in turn order.

    """
    thrall = CharacterBuilder("orc", "Thrall", log).with_armor().with_weapon("halberd").build()
    gimli = CharacterBuilder("dwarf", "Gimli", log).with_armor().with_weapon("sword").build()
    aragorn = CharacterBuilder("human", "Aragorn", log).with_armor().with_weapon("sword").build()
    legolas = CharacterBuilder("elf", "Legolas", log).with_armor().with_weapon("bow").build()
    return [thrall, gimli, aragorn, legolas]


def main() -> None:
    setup_logging()

    crule("Battle Royale", style="bold green")

    battle = BattleRoyale(log=BATTLE_LOG)
    for character in build_demo_roster(BATTLE_LOG):
        battle.add_character(character)

    crule("Fighters", style="bold blue", characters="-")
    battle.show_roster()
    cprint("")

    battle.start_battle()

    crule("=== FULL BATTLE LOG ===", style="bold green", characters="=")
    for line in BATTLE_LOG.get_logs():
        cprint_verbatim(line)


if __name__ == "__main__":
    main()
