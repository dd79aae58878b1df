"""
Display formatting utilities for CLI output.

Provides step grids, bar graphics and other formatting helpers.
"""

from typing import Sequence

from splicedrum.models.pattern import format_float32
from splicedrum.models.track import STEP_COUNT, format_steps


def value_bar(
    value: int,
    max_value: int = STEP_COUNT,
    width: int = 8,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value.

    Args:
        value: Current value
        max_value: Maximum value (default 16 steps)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like " 8 [████░░░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:2d} [{bar}]"
    return f"[{bar}]"


def step_markup(steps: Sequence[bool]) -> str:
    """
    Step grid with Rich markup, active steps highlighted.

    Returns:
        "|[bold green]x[/bold green]---|..." for use in tables
    """
    grid = format_steps(steps)
    return grid.replace("x", "[bold green]x[/bold green]").replace("-", "[dim]-[/dim]")


def format_tempo(tempo: float) -> str:
    """
    Format tempo in BPM.

    Returns:
        "120 BPM" or "98.4 BPM"
    """
    return f"{format_float32(tempo)} BPM"


def format_version(version: str) -> str:
    """Version string, or a placeholder when the file has none."""
    return version if version else "[dim](empty)[/dim]"
