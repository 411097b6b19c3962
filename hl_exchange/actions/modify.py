"""
Batch-modify records.

A ``Modify`` replaces a resting order, identified either by its numeric
exchange id or by the client order id string. Both shapes share the single
``oid`` slot, so at most one identifier is ever carried.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple, Union

from hyperliquid.utils.types import Cloid

from hl_exchange.actions.orders import Order, cloid_to_raw
from hl_exchange.encoding.wire import WireField, WireRecord
from hl_exchange.utils.optional import owned

BATCH_MODIFY_ACTION_TYPE = "batchModify"


@dataclass(frozen=True)
class Modify(WireRecord):
    oid: Union[int, str, None] = None
    order: Optional[Order] = None

    WIRE_FIELDS = (
        WireField("oid", "oid"),
        WireField("order", "order"),
    )

    @property
    def order_id(self) -> Optional[int]:
        """Numeric exchange id, or None when identified by client id."""
        if isinstance(self.oid, int) and not isinstance(self.oid, bool):
            return self.oid
        return None

    @property
    def client_id(self) -> Optional[str]:
        """Client order id, or None when identified by numeric id."""
        return self.oid if isinstance(self.oid, str) else None


ModifyOption = Callable[[Modify], Modify]


def by_order_id(oid: int, order: Order) -> ModifyOption:
    """Option targeting the resting order with exchange id ``oid``."""
    def apply(m: Modify) -> Modify:
        return replace(m, oid=owned(oid), order=owned(order))
    return apply


def by_client_id(cloid: Union[str, Cloid], order: Order) -> ModifyOption:
    """Option targeting the resting order tagged with ``cloid``."""
    def apply(m: Modify) -> Modify:
        return replace(m, oid=cloid_to_raw(cloid), order=owned(order))
    return apply


def build_modify(*options: ModifyOption) -> Modify:
    """Apply options in order; a later identifier replaces an earlier one."""
    modify = Modify()
    for opt in options:
        modify = opt(modify)
    return modify


@dataclass(frozen=True)
class BatchModifyAction(WireRecord):
    type: Optional[str] = BATCH_MODIFY_ACTION_TYPE
    modifies: Optional[Tuple[Modify, ...]] = None

    WIRE_FIELDS = (
        WireField("type", "type"),
        WireField("modifies", "modifies"),
    )
