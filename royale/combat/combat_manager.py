"""
Combat manager module for the simulator.

Runs a battle royale: every living fighter attacks every other living fighter
once per round, and rounds repeat until at most one fighter is left standing.
"""

from catchery import log_warning
from pydantic import BaseModel, Field

from royale.character.main import Character
from royale.core.battle_log import BATTLE_LOG, BattleLog
from royale.core.logging import log_debug, log_info
from royale.core.utils import cprint

from .attack import RandomSource, attack
from .statistics import BattleStatistics, show_statistics


class BattleResult(BaseModel):
    """The outcome of a finished battle."""

    winner: str | None = Field(
        default=None,
        description="The name of the last fighter standing, None on a draw.",
    )
    winner_health: int | None = Field(
        default=None,
        description="The health the winner was left with.",
    )
    rounds: int = Field(
        default=0,
        description="The number of rounds that were fought.",
    )
    survivors: list[str] = Field(
        default_factory=list,
        description="The names of the fighters alive at the end.",
    )
    statistics: BattleStatistics = Field(
        default_factory=BattleStatistics,
        description="The dodge statistics of the battle.",
    )

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class BattleRoyale:
    """Manages the flow of an all-against-all battle.

    Participants act in the order they were added. A battle instance is meant
    to be run once: populate it with `add_character`, then call
    `start_battle`.
    """

    def __init__(
        self,
        log: BattleLog | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize an empty battle.

        Args:
            log (BattleLog | None): The battle log to report to. Defaults to
                the shared log.
            rng (RandomSource | None): The random source for dodge checks.
                Defaults to the `random` module.

        """
        self.log: BattleLog = BATTLE_LOG if log is None else log
        self.rng: RandomSource | None = rng

        # Every participant, in turn order.
        self.characters: list[Character] = []

        # The number of rounds fought so far.
        self.round: int = 0

        # The result of the battle, once it has been fought.
        self.result: BattleResult | None = None

    def add_character(self, character: Character) -> None:
        """Adds a fighter at the end of the turn order."""
        self.characters.append(character)

    def get_alive_participants(self) -> list[Character]:
        """Returns the participants still alive, in turn order."""
        return [char for char in self.characters if char.is_alive()]

    def show_roster(self) -> None:
        """Prints the status line of every participant to the console."""
        for character in self.characters:
            cprint(f"    {character.display.get_status_line(show_bars=True)}")

    def start_battle(self) -> BattleResult:
        """Fights the battle until at most one participant is alive.

        Returns:
            BattleResult: The winner, the number of rounds and the statistics.

        """
        if self.result is not None:
            log_warning(
                "The battle has already been fought",
                {"rounds": self.round, "winner": self.result.winner},
            )
            return self.result

        self.log.log("⚔️  BATTLE BEGINS!")
        self.log.log("=====================================")

        alive = self.get_alive_participants()

        while len(alive) > 1:
            self.round += 1
            self.execute_round(alive)
            self.remove_fallen(alive)
            log_info(
                f"Round {self.round} resolved",
                {"alive": len(alive)},
            )

        self.declare_winner(alive)
        statistics = show_statistics(self.characters, self.log)

        winner = alive[0] if len(alive) == 1 else None
        self.result = BattleResult(
            winner=winner.name if winner is not None else None,
            winner_health=winner.health if winner is not None else None,
            rounds=self.round,
            survivors=[char.name for char in alive],
            statistics=statistics,
        )
        return self.result

    def execute_round(self, alive: list[Character]) -> None:
        """Runs one round: each fighter attacks each other fighter once.

        Fighters killed earlier in the round neither attack nor get attacked
        for the rest of it.

        Args:
            alive (list[Character]): The fighters alive when the round starts.

        """
        self.log.log(f"\n🛡️  ROUND {self.round}")
        self.log.log("Fighters alive: " + ", ".join(char.name for char in alive))

        for i, attacker in enumerate(alive):
            for j, defender in enumerate(alive):
                if i != j and attacker.is_alive() and defender.is_alive():
                    attack(attacker, defender, self.log, self.rng)

    def remove_fallen(self, alive: list[Character]) -> None:
        """Removes, in place, the fighters that died during the round."""
        # Walk backwards so removal by index stays valid.
        for i in range(len(alive) - 1, -1, -1):
            if alive[i].is_dead():
                self.log.log(f"🚩 {alive[i].name} is out of the battle!")
                log_debug(
                    f"{alive[i].name} eliminated",
                    {"round": self.round, "health": alive[i].health},
                )
                del alive[i]

    def declare_winner(self, alive: list[Character]) -> None:
        """Announces the last fighter standing, or a draw."""
        if len(alive) == 1:
            winner = alive[0]
            self.log.log(f"\n🎉 WINNER: {winner.name}!")
            self.log.log(f"❤️  {winner.name} survived with {winner.health} HP!")
        else:
            self.log.log("\n⚰️  Everyone has fallen! It's a draw!")
