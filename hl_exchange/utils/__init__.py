"""Utilities: optional-value helper, precision helpers."""

from hl_exchange.utils.optional import owned
from hl_exchange.utils.precision import format_price, format_size

__all__ = [
    "owned",
    "format_price",
    "format_size",
]
