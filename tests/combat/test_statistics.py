"""
Tests for the battle statistics report.
"""

from royale.character.character_builder import CharacterBuilder
from royale.combat.statistics import compute_statistics, show_statistics
from royale.core.battle_log import BattleLog


def test_statistics_cover_every_participant():
    log = BattleLog(echo=False)
    legolas = CharacterBuilder("elf", "Legolas", log).build()
    arwen = CharacterBuilder("elf", "Arwen", log).build()
    gimli = CharacterBuilder("dwarf", "Gimli", log).build()
    legolas.dodge_count = 4
    arwen.dodge_count = 2
    gimli.dodge_count = 3
    gimli.health = -10

    statistics = compute_statistics([legolas, gimli, arwen])
    assert statistics.dodges_by_character == [
        ("Legolas", 4),
        ("Gimli", 3),
        ("Arwen", 2),
    ]
    assert statistics.total_dodges == 9
    assert statistics.elf_dodges == 6


def test_statistics_are_logged_in_roster_order():
    log = BattleLog(echo=False)
    thrall = CharacterBuilder("orc", "Thrall", log).build()
    legolas = CharacterBuilder("elf", "Legolas", log).build()
    legolas.dodge_count = 5
    log.clear()

    show_statistics([thrall, legolas], log)
    assert log.get_logs() == [
        "\n📊 BATTLE STATISTICS:",
        "Thrall: 0 successful dodges",
        "Legolas: 5 successful dodges",
        "Total dodges: 5",
        "Elf dodges: 5",
    ]


def test_statistics_of_empty_roster():
    statistics = compute_statistics([])
    assert statistics.dodges_by_character == []
    assert statistics.total_dodges == 0
    assert statistics.elf_dodges == 0
