"""Request facades, signing and transport."""

from hl_exchange.execution.api import (
    ExchangeBatchModifyAPI,
    ExchangeCancelAPI,
    ExchangeCancelByCloidAPI,
    ExchangeOrderAPI,
    ExchangeUpdateLeverageAPI,
)
from hl_exchange.execution.signer import L1Signer, NonceSource
from hl_exchange.execution.client import ExchangeRestClient

__all__ = [
    "ExchangeBatchModifyAPI",
    "ExchangeCancelAPI",
    "ExchangeCancelByCloidAPI",
    "ExchangeOrderAPI",
    "ExchangeUpdateLeverageAPI",
    "L1Signer",
    "NonceSource",
    "ExchangeRestClient",
]
