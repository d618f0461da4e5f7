"""
Display Formatting

Renders derived values for the presentation surfaces.
"""

from typing import Optional

from core.settings import settings
from schemas.stats import PlayerCareerRecord, StatCategory


def format_average(
    value: Optional[float],
    precision: Optional[int] = None,
    no_data: Optional[str] = None,
) -> str:
    """
    Format an average for display.

    Handles:
    - None -> no-data marker ("-" by default)
    - 15 -> "15.0"

    Examples:
        >>> format_average(None)
        '-'
        >>> format_average(15)
        '15.0'
        >>> format_average(0.0)
        '0.0'
    """
    if precision is None:
        precision = settings.display_precision
    if no_data is None:
        no_data = settings.no_data_marker

    if value is None:
        return no_data
    return f"{value:.{precision}f}"


def format_career_averages(
    record: PlayerCareerRecord,
    precision: Optional[int] = None,
) -> dict[str, str]:
    """
    Render the career stat cards of a player profile.

    Returns:
        Dict with one formatted value per category plus "pi"
    """
    cards = {
        category.value: format_average(record.averages.value(category), precision)
        for category in StatCategory
    }
    cards["pi"] = format_average(record.average_pi, precision)
    return cards
