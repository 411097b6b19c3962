"""
Order placement records and the order builder.

Prices, sizes and trigger prices are decimal strings, never floats, so the
signed pre-image carries exactly the digits the caller chose.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

from hyperliquid.utils.types import Cloid

from hl_exchange.core.errors import InvalidOrderTypeError
from hl_exchange.encoding.wire import WireField, WireRecord
from hl_exchange.utils.optional import owned

Tif = Literal["Alo", "Ioc", "Gtc"]
Tpsl = Literal["tp", "sl"]
Grouping = Literal["na", "normalTpsl", "positionTpsl"]

TIF_POST_ONLY = "Alo"
TIF_IOC = "Ioc"
TIF_GTC = "Gtc"

GROUPING_NA = "na"
GROUPING_NORMAL_TPSL = "normalTpsl"
GROUPING_POSITION_TPSL = "positionTpsl"

ORDER_ACTION_TYPE = "order"


def cloid_to_raw(cloid: Union[str, Cloid, None]) -> Optional[str]:
    """Reduce an SDK ``Cloid`` to its raw hex string; strings pass through."""
    if isinstance(cloid, Cloid):
        return cloid.to_raw()
    return cloid


@dataclass(frozen=True)
class OrderTypeLimit(WireRecord):
    tif: Optional[str] = None

    WIRE_FIELDS = (WireField("tif", "tif"),)


@dataclass(frozen=True)
class OrderTypeTrigger(WireRecord):
    is_market: Optional[bool] = None
    trigger_px: Optional[str] = None
    tpsl: Optional[str] = None

    WIRE_FIELDS = (
        WireField("is_market", "isMarket"),
        WireField("trigger_px", "triggerPx"),
        WireField("tpsl", "tpsl"),
    )


@dataclass(frozen=True)
class OrderType(WireRecord):
    """Limit or trigger; exactly one branch may be set for submission."""

    limit: Optional[OrderTypeLimit] = None
    trigger: Optional[OrderTypeTrigger] = None

    WIRE_FIELDS = (
        WireField("limit", "limit", optional=True),
        WireField("trigger", "trigger", optional=True),
    )

    def check_wire(self, path: str) -> None:
        if (self.limit is None) == (self.trigger is None):
            raise InvalidOrderTypeError(path)


@dataclass(frozen=True)
class Order(WireRecord):
    """
    A single order line item.

    Wire keys: a=asset, b=isBuy, p=price, s=size, r=reduceOnly, t=orderType,
    c=client order id (optional).
    """

    asset: Optional[int] = None
    is_buy: Optional[bool] = None
    price: Optional[str] = None
    size: Optional[str] = None
    reduce_only: Optional[bool] = None
    order_type: Optional[OrderType] = None
    client_order_id: Optional[str] = None

    WIRE_FIELDS = (
        WireField("asset", "a"),
        WireField("is_buy", "b"),
        WireField("price", "p"),
        WireField("size", "s"),
        WireField("reduce_only", "r"),
        WireField("order_type", "t"),
        WireField("client_order_id", "c", optional=True),
    )

    def __post_init__(self):
        object.__setattr__(self, "client_order_id", cloid_to_raw(self.client_order_id))


@dataclass(frozen=True)
class BuilderFee(WireRecord):
    """Builder fee: ``address`` receives ``fee`` tenths of a basis point of notional."""

    address: Optional[str] = None
    fee: Optional[int] = None

    WIRE_FIELDS = (
        WireField("address", "b"),
        WireField("fee", "f"),
    )

    def __post_init__(self):
        # the exchange hashes the lowercase address
        if isinstance(self.address, str):
            object.__setattr__(self, "address", self.address.lower())


@dataclass(frozen=True)
class OrderAction(WireRecord):
    type: Optional[str] = ORDER_ACTION_TYPE
    orders: Optional[Tuple[Order, ...]] = None
    grouping: Optional[str] = None
    builder: Optional[BuilderFee] = None

    WIRE_FIELDS = (
        WireField("type", "type"),
        WireField("orders", "orders"),
        WireField("grouping", "grouping", optional=True),
        WireField("builder", "builder", optional=True),
    )


@dataclass
class _LimitDraft:
    tif: Optional[str] = None


@dataclass
class _TriggerDraft:
    is_market: Optional[bool] = None
    trigger_px: Optional[str] = None
    tpsl: Optional[str] = None


@dataclass
class _OrderTypeDraft:
    limit: Optional[_LimitDraft] = None
    trigger: Optional[_TriggerDraft] = None


@dataclass
class _OrderDraft:
    asset: Optional[int] = None
    is_buy: Optional[bool] = None
    price: Optional[str] = None
    size: Optional[str] = None
    reduce_only: Optional[bool] = None
    order_type: Optional[_OrderTypeDraft] = None
    client_order_id: Optional[str] = None


class OrderBuilder:
    """
    Fluent, reusable order template.

    Setters mutate the builder in place; :meth:`build` returns an independent
    ``Order`` snapshot, so a single builder can stamp out a ladder of orders:

        ob = OrderBuilder().asset(0).is_buy(True).size("1").limit_tif("Gtc")
        ladder = [ob.price(px).build() for px in ("100", "99.5", "99")]

    Not safe for concurrent mutation; the built orders are.
    """

    def __init__(self):
        self._draft = _OrderDraft()

    def build(self) -> Order:
        """Copy the current state, through every nested level, into an ``Order``."""
        src = self._draft
        order_type = None
        if src.order_type is not None:
            limit = None
            trigger = None
            if src.order_type.limit is not None:
                limit = OrderTypeLimit(tif=owned(src.order_type.limit.tif))
            if src.order_type.trigger is not None:
                t = src.order_type.trigger
                trigger = OrderTypeTrigger(
                    is_market=owned(t.is_market),
                    trigger_px=owned(t.trigger_px),
                    tpsl=owned(t.tpsl),
                )
            order_type = OrderType(limit=limit, trigger=trigger)
        return Order(
            asset=owned(src.asset),
            is_buy=owned(src.is_buy),
            price=owned(src.price),
            size=owned(src.size),
            reduce_only=owned(src.reduce_only),
            order_type=order_type,
            client_order_id=owned(src.client_order_id),
        )

    def asset(self, asset: int) -> "OrderBuilder":
        """Asset index (e.g. 0 is usually BTC on mainnet perps)."""
        self._draft.asset = owned(asset)
        return self

    def is_buy(self, is_buy: bool) -> "OrderBuilder":
        self._draft.is_buy = owned(is_buy)
        return self

    def price(self, price: str) -> "OrderBuilder":
        """Limit price as a decimal string."""
        self._draft.price = owned(price)
        return self

    def size(self, size: str) -> "OrderBuilder":
        """Order size as a decimal string."""
        self._draft.size = owned(size)
        return self

    def reduce_only(self, reduce_only: bool) -> "OrderBuilder":
        """If true the order may only shrink an existing position."""
        self._draft.reduce_only = owned(reduce_only)
        return self

    def client_order_id(self, cloid: Union[str, Cloid]) -> "OrderBuilder":
        self._draft.client_order_id = cloid_to_raw(cloid)
        return self

    def _ensure_order_type(self) -> _OrderTypeDraft:
        if self._draft.order_type is None:
            self._draft.order_type = _OrderTypeDraft()
        return self._draft.order_type

    def _ensure_limit(self) -> _LimitDraft:
        ot = self._ensure_order_type()
        if ot.limit is None:
            ot.limit = _LimitDraft()
        # a limit order carries no trigger fields
        ot.trigger = None
        return ot.limit

    def _ensure_trigger(self) -> _TriggerDraft:
        ot = self._ensure_order_type()
        if ot.trigger is None:
            ot.trigger = _TriggerDraft()
        ot.limit = None
        return ot.trigger

    def limit_tif(self, tif: Tif) -> "OrderBuilder":
        """
        Make this a limit order with the given time-in-force.

        "Alo" is post-only, "Ioc" fills immediately or cancels, "Gtc" rests
        until filled or cancelled. Clears any trigger settings.
        """
        self._ensure_limit().tif = owned(tif)
        return self

    def trigger(self, is_market: bool, trigger_px: str, tpsl: Tpsl) -> "OrderBuilder":
        """Make this a trigger (take-profit/stop-loss) order. Clears any limit settings."""
        t = self._ensure_trigger()
        t.is_market = owned(is_market)
        t.trigger_px = owned(trigger_px)
        t.tpsl = owned(tpsl)
        return self
