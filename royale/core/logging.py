"""
Logging configuration module for the simulator.

Provides centralized logging setup with colored output using rich. The
diagnostic logger configured here is separate from the battle log, which holds
the narrative of a fight.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .constants import GLOBAL_VERBOSE_LEVEL


def level_for_verbosity(verbose: int = GLOBAL_VERBOSE_LEVEL) -> int:
    """
    Maps a verbose level to a logging level.

    Args:
        verbose (int): 0 for warnings only, 1 for info, 2 or more for debug.

    Returns:
        int: The matching logging level.

    """
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int | None = None) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int | None): The logging level to set. Defaults to the level
            derived from GLOBAL_VERBOSE_LEVEL.

    """
    if level is None:
        level = level_for_verbosity()

    # Diagnostics go to stderr so they never mix with the battle narrative.
    console = Console(width=120, stderr=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(
        logging.Formatter("%(name)s - %(message)s", datefmt="[%X]")
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


# Create a default logger for the simulator
logger = get_logger("royale")


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    Args:
        message (str): The debug message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    if context:
        # Format context as key=value pairs
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"

    logger.debug(message)


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"

    logger.info(message)
