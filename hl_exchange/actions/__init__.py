"""Action payloads, order builder and the request envelope."""

from hl_exchange.actions.orders import (
    GROUPING_NA,
    GROUPING_NORMAL_TPSL,
    GROUPING_POSITION_TPSL,
    TIF_GTC,
    TIF_IOC,
    TIF_POST_ONLY,
    BuilderFee,
    Grouping,
    Order,
    OrderAction,
    OrderBuilder,
    OrderType,
    OrderTypeLimit,
    OrderTypeTrigger,
    Tif,
    Tpsl,
)
from hl_exchange.actions.cancel import Cancel, CancelAction, CancelByCloid, CancelByCloidAction
from hl_exchange.actions.modify import BatchModifyAction, Modify, by_client_id, by_order_id
from hl_exchange.actions.leverage import UpdateLeverageAction
from hl_exchange.actions.envelope import ExchangeRequest, Signature

__all__ = [
    "GROUPING_NA",
    "GROUPING_NORMAL_TPSL",
    "GROUPING_POSITION_TPSL",
    "TIF_GTC",
    "TIF_IOC",
    "TIF_POST_ONLY",
    "Grouping",
    "Tif",
    "Tpsl",
    "BuilderFee",
    "Order",
    "OrderAction",
    "OrderBuilder",
    "OrderType",
    "OrderTypeLimit",
    "OrderTypeTrigger",
    "Cancel",
    "CancelAction",
    "CancelByCloid",
    "CancelByCloidAction",
    "BatchModifyAction",
    "Modify",
    "by_client_id",
    "by_order_id",
    "UpdateLeverageAction",
    "ExchangeRequest",
    "Signature",
]
