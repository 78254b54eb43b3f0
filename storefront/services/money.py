"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout; floats and ints
only appear at the storage and gateway boundaries.
"""
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Stripe and most gateways take amounts in minor units (cents)
MINOR_UNITS = 100


def to_decimal(value: Number | None) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def floor_money(value: Number) -> Decimal:
    """Truncate toward negative infinity to a whole unit (JS ``Math.floor``)."""
    return to_decimal(value).to_integral_value(rounding=ROUND_FLOOR)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def to_minor_units(value: Number) -> int:
    """
    Convert a whole-unit amount to minor units (cents).

    The value is expected to be already floored; any fraction is dropped.

    Args:
        value: Amount in major units (e.g., 102)

    Returns:
        Amount in minor units (e.g., 10200)
    """
    return int(floor_money(value)) * MINOR_UNITS


def to_storage_number(value: Number) -> int | float:
    """Integral amounts are stored as int, everything else as float."""
    decimal_value = to_decimal(value)
    if decimal_value == decimal_value.to_integral_value():
        return int(decimal_value)
    return float(decimal_value)
