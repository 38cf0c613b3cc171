"""
Battle log module for the simulator.

The battle log is the ordered, append-only narrative of a fight. Every
component that reports something writes to the same log instance, which keeps
the lines in memory and echoes them to the console as they are produced.
"""

from .utils import cprint_verbatim


class BattleLog:
    """
    Ordered record of human-readable battle events.

    Attributes:
        echo (bool):
            Whether each line is also printed to the console when logged.

    """

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self._logs: list[str] = []

    def log(self, message: str) -> None:
        """
        Appends a message to the log and prints it if echo is enabled.

        Args:
            message (str): The line to record.

        """
        self._logs.append(message)
        if self.echo:
            cprint_verbatim(message)

    def clear(self) -> None:
        """Removes every recorded line."""
        self._logs.clear()

    def get_logs(self) -> list[str]:
        """
        Returns the recorded lines in emission order.

        Returns:
            list[str]: A copy of the recorded lines.

        """
        return list(self._logs)

    def __len__(self) -> int:
        return len(self._logs)


# Shared battle log used by every component unless another one is given.
BATTLE_LOG = BattleLog()
