"""
Optional-value helper.

``None`` always means "field absent"; any other value, including ``0``,
``False`` and ``""``, means "field present with this value".
"""

import copy
from typing import TypeVar

T = TypeVar("T")


def owned(value: T) -> T:
    """Return an independent copy of ``value`` that shares no storage with it."""
    return copy.deepcopy(value)
