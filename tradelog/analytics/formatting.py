"""Display formatting helpers."""

import math


def format_currency(value: float, symbol: str = "$") -> str:
    """Format a value as currency with thousands separators and 2 decimals.

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-50)
        '-$50.00'
    """
    sign = "-" if value < 0 else ""
    if math.isinf(value):
        return f"{sign}{symbol}∞"
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percent(value: float) -> str:
    """Format a percentage value with 2 decimals, e.g. ``'12.50%'``."""
    if math.isinf(value):
        return "∞%" if value > 0 else "-∞%"
    if value == 0:
        value = 0.0
    return f"{value:.2f}%"
