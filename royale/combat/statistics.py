"""
Statistics module for the simulator.

Aggregates the dodge counts of every participant once a battle is over.
"""

from pydantic import BaseModel, Field

from royale.character.main import Character
from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.constants import RaceKind


class BattleStatistics(BaseModel):
    """Dodge statistics of a finished battle."""

    dodges_by_character: list[tuple[str, int]] = Field(
        default_factory=list,
        description="The dodge count of every participant, in roster order.",
    )
    total_dodges: int = Field(
        default=0,
        description="The sum of the dodge counts of all participants.",
    )
    elf_dodges: int = Field(
        default=0,
        description="The sum of the dodge counts of the elf participants.",
    )


def compute_statistics(characters: list[Character]) -> BattleStatistics:
    """
    Computes the dodge statistics of the given participants.

    Args:
        characters (list[Character]):
            Every participant of the battle, dead or alive.

    Returns:
        BattleStatistics:
            The per-character and aggregated dodge counts.

    """
    return BattleStatistics(
        dodges_by_character=[(c.name, c.dodge_count) for c in characters],
        total_dodges=sum(c.dodge_count for c in characters),
        elf_dodges=sum(c.dodge_count for c in characters if c.race == RaceKind.ELF),
    )


def show_statistics(
    characters: list[Character],
    log: BattleLog | None = None,
) -> BattleStatistics:
    """
    Computes the dodge statistics and writes them to the battle log.

    Args:
        characters (list[Character]):
            Every participant of the battle, dead or alive.
        log (BattleLog | None):
            The battle log to report to. Defaults to the shared log.

    Returns:
        BattleStatistics:
            The statistics that were logged.

    """
    log = BATTLE_LOG if log is None else log
    statistics = compute_statistics(characters)

    log.log("\n📊 BATTLE STATISTICS:")
    for name, dodges in statistics.dodges_by_character:
        log.log(f"{name}: {dodges} successful dodges")
    log.log(f"Total dodges: {statistics.total_dodges}")
    log.log(f"Elf dodges: {statistics.elf_dodges}")
    return statistics
