"""Display formatting for dynasty values."""

from typing import Union


def format_value(value: Union[int, float]) -> str:
    """Render a value for display.

    Examples:
        15500 -> "15.5K"
        10000 -> "10.0K"
        5000  -> "5,000"
        999   -> "999"
    """
    if value >= 10000:
        return f"{value / 1000:.1f}K"
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"
