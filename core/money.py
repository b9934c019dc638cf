"""Monetary unit conversion.

Amounts are persisted as integer cents. $45.50 = 4550 cents.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

_CENTS_PER_UNIT = Decimal(100)
_WHOLE = Decimal(1)


def to_cents(amount: Decimal) -> int:
    """
    Convert a decimal currency amount to integer cents.

    Rounds to the nearest cent, halves away from zero (10.005 -> 1001).

    Raises:
        ValueError: If amount is NaN, infinite, or too large to represent in cents.
    """
    if not amount.is_finite():
        raise ValueError(f"Cannot convert non-finite amount {amount} to cents")
    try:
        cents = (amount * _CENTS_PER_UNIT).quantize(_WHOLE, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Amount {amount} is too large to convert to cents") from e
    return int(cents)
