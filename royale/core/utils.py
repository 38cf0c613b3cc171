"""
Utilities module for the simulator.

Provides console printing with rich formatting and a few display helpers.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def cprint_verbatim(message: str) -> None:
    """
    Prints a line exactly as given, on a single line.

    Markup, highlighting and emoji shortcodes are disabled and long lines are
    not wrapped at the console width.

    Args:
        message (str): The line to print.

    """
    _console.print(
        message, markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value. Negative values draw an empty bar.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        filled = 0
    else:
        filled = int((max(current, 0) / maximum) * length)
    filled = min(filled, length)
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
