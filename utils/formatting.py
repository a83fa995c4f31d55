"""
Formatting Utilities

Helper functions for formatting metric values for display.
"""

from typing import Optional, Union


def format_number(value: Union[int, float], decimals: int = 0) -> str:
    """
    Format a number with thousands separators.

    Args:
        value: Number to format
        decimals: Number of decimal places

    Returns:
        Formatted string
    """
    if decimals == 0:
        return f"{int(round(value)):,}"
    else:
        return f"{value:,.{decimals}f}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a 0-100 percentage with a % sign."""
    return f"{value:.{decimals}f}%"


def format_days(value: Optional[float], decimals: int = 1) -> str:
    """Format a length of stay; None renders as n/a."""
    if value is None:
        return "n/a"
    return f"{value:.{decimals}f} days"
