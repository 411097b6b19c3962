"""
Precision helpers for Hyperliquid tick/lot formatting.

Enforces ≤5 significant figures for price and szDecimals for size. All
arithmetic is done in ``Decimal`` and the result is a decimal string ready for
an order's price/size fields.
"""

from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

Number = Union[str, int, float, Decimal]

MAX_SIG_FIGS = 5


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal, going through ``str`` so floats keep their shortest repr."""
    if isinstance(value, Decimal):
        return value
    try:
        d = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"not a decimal number: {value!r}")
    if not d.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return d


def to_wire_str(d: Decimal) -> str:
    """Plain decimal string with no exponent and no trailing zeros."""
    s = format(d.normalize(), "f")
    return "0" if s in ("-0", "") else s


def format_price(px: Number, sz_decimals: int, max_decimals: int = 6) -> str:
    """
    Format price per Hyperliquid rules.

    Rules:
    - Integer prices are always accepted
    - Otherwise ≤5 significant figures
    - ≤(MAX_DECIMALS - szDecimals) decimal places

    Args:
        px: Price
        sz_decimals: Asset szDecimals
        max_decimals: MAX_DECIMALS (6 for perps, 8 for spot)

    Returns:
        Formatted price string
    """
    d = to_decimal(px)
    if d <= 0:
        raise ValueError(f"price must be > 0, got {px}")

    if d == d.to_integral_value():
        return to_wire_str(d)

    max_dp = max(0, max_decimals - sz_decimals)
    int_digits = d.adjusted() + 1
    decimals = min(max_dp, max(0, MAX_SIG_FIGS - int_digits))
    q = d.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return to_wire_str(q)


def format_size(sz: Number, sz_decimals: int) -> str:
    """
    Format size per lot precision (rounds down to the lot).

    Args:
        sz: Size (quantity)
        sz_decimals: Asset szDecimals

    Returns:
        Formatted size string
    """
    d = to_decimal(sz)
    if d < 0:
        raise ValueError(f"size must be >= 0, got {sz}")
    q = d.quantize(Decimal(1).scaleb(-sz_decimals), rounding=ROUND_FLOOR)
    return to_wire_str(q)
