"""Exceptions raised by the simulator."""


class SimulatorError(Exception):
    """Base class for all simulator errors."""


class UnknownRaceKind(SimulatorError, ValueError):
    """Raised when a character is requested for a race that does not exist."""

    def __init__(self, race: object) -> None:
        super().__init__(f"Unknown race: {race}")
        self.race = race


class UnknownWeaponKind(SimulatorError, ValueError):
    """Raised when a weapon is requested for a kind that does not exist."""

    def __init__(self, weapon: object) -> None:
        super().__init__(f"Unknown weapon type: {weapon}")
        self.weapon = weapon
