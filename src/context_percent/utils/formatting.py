"""Formatting utilities for percentages and progress bars."""

import math

FILLED_CHAR = "█"
EMPTY_CHAR = "░"


def render_progress_bar(
    fraction: float,
    width: int,
    filled_char: str = FILLED_CHAR,
    empty_char: str = EMPTY_CHAR,
) -> str:
    """Render a fixed-width progress bar.

    Args:
        fraction: Filled fraction (0-1)
        width: Number of glyphs in the bar
        filled_char: Character for filled segments
        empty_char: Character for empty segments

    Returns:
        Progress bar string (e.g., "████░░░░")
    """
    filled = math.floor(fraction * width)
    return filled_char * filled + empty_char * (width - filled)


def format_percentage(percentage: float, decimals: int = 1) -> str:
    """Format percentage with specified decimal places.

    Args:
        percentage: Percentage value (0-100)
        decimals: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "67.5%")
    """
    return f"{percentage:.{decimals}f}%"
