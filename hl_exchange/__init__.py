"""
Hyperliquid Exchange Request Builder

Builds, signs and submits exchange actions (order, cancel, cancel-by-cloid,
batch modify, update leverage).

Components:
- Actions: Immutable action records and the reusable OrderBuilder
- Envelope: Nonce/signature/vault/expiry wrapper shared by all actions
- Encoding: One wire reduction feeding both JSON (transport) and msgpack (signing)
- Facades: Fluent per-action accumulators
- Signer / Client: eth_account L1 signing and /exchange submission
"""

__version__ = "0.1.0"

from hl_exchange.core.config import Config
from hl_exchange.actions import (
    Cancel,
    CancelByCloid,
    ExchangeRequest,
    Order,
    OrderBuilder,
)
from hl_exchange.encoding import encode_binary, encode_structured
from hl_exchange.execution import ExchangeRestClient, L1Signer

__all__ = [
    "Config",
    "Cancel",
    "CancelByCloid",
    "ExchangeRequest",
    "Order",
    "OrderBuilder",
    "encode_binary",
    "encode_structured",
    "ExchangeRestClient",
    "L1Signer",
]
