"""
Formatting utilities.

Fractional values are rounded half-up to two decimals, the same rule
final prices use.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


Amount = Union[int, float, Decimal]

CENTS = Decimal("0.01")


def _two_places(value: Amount) -> str:
    if isinstance(value, float):
        value = Decimal(str(value))
    return f"{Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP):f}"


def format_number(value: Amount) -> str:
    """
    Format a number for display.

    Integral values render without decimals, fractional values with two.

    Args:
        value: The number to format.

    Returns:
        Formatted number string.
    """
    if isinstance(value, int):
        return str(value)
    if value == int(value):
        return str(int(value))
    return _two_places(value)


def format_currency(amount: Amount, currency: str = "Ft") -> str:
    """
    Format an amount as currency.

    Integers render as whole units; Decimal and float amounts always
    render with two decimals.

    Args:
        amount: The amount in whole currency units.
        currency: Currency suffix (default Ft).

    Returns:
        Formatted currency string.
    """
    if isinstance(amount, int):
        return f"{amount} {currency}"
    return f"{_two_places(amount)} {currency}"


def format_area(value: Amount) -> str:
    """
    Format an area in square meters with two decimals.

    Args:
        value: The area value.

    Returns:
        Formatted area string.
    """
    return f"{_two_places(value)} m²"
