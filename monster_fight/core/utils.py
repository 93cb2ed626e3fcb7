"""
Utilities module for the simulator.

Provides console printing with rich formatting and small display helpers
shared by the command-line harness and the report sheets.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Console shared by the sheets and the command-line harness.
_console = Console(width=120)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Prints to the shared console, rendering rich markup.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Prints a horizontal rule to the shared console.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    # Monsters may start with non-positive health.
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
