"""Cancel-by-order-id and cancel-by-client-id records."""

from dataclasses import dataclass
from typing import Optional, Tuple

from hl_exchange.actions.orders import cloid_to_raw
from hl_exchange.encoding.wire import WireField, WireRecord

CANCEL_ACTION_TYPE = "cancel"
CANCEL_BY_CLOID_ACTION_TYPE = "cancelByCloid"


@dataclass(frozen=True)
class Cancel(WireRecord):
    """Cancel the exchange-assigned order ``oid`` on ``asset``."""

    asset: Optional[int] = None
    oid: Optional[int] = None

    WIRE_FIELDS = (
        WireField("asset", "a"),
        WireField("oid", "o"),
    )


@dataclass(frozen=True)
class CancelAction(WireRecord):
    type: Optional[str] = CANCEL_ACTION_TYPE
    cancels: Optional[Tuple[Cancel, ...]] = None

    WIRE_FIELDS = (
        WireField("type", "type"),
        WireField("cancels", "cancels"),
    )


@dataclass(frozen=True)
class CancelByCloid(WireRecord):
    """Cancel the order the caller tagged with ``cloid`` on ``asset``."""

    asset: Optional[int] = None
    cloid: Optional[str] = None

    WIRE_FIELDS = (
        WireField("asset", "asset"),
        WireField("cloid", "cloid"),
    )

    def __post_init__(self):
        object.__setattr__(self, "cloid", cloid_to_raw(self.cloid))


@dataclass(frozen=True)
class CancelByCloidAction(WireRecord):
    type: Optional[str] = CANCEL_BY_CLOID_ACTION_TYPE
    cancels: Optional[Tuple[CancelByCloid, ...]] = None

    WIRE_FIELDS = (
        WireField("type", "type"),
        WireField("cancels", "cancels"),
    )
