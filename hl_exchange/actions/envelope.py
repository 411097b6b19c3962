"""
Request envelope shared by every exchange action.

The envelope binds one action to nonce, signature, and the optional vault
address and expiry. The signature covers the binary encoding of the action
together with nonce, vault address and expiry (see ``execution.signer``).
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from hl_exchange.encoding.wire import WireField, WireRecord

A = TypeVar("A", bound=WireRecord)


@dataclass(frozen=True)
class Signature(WireRecord):
    r: Optional[str] = None
    s: Optional[str] = None
    v: Optional[int] = None

    WIRE_FIELDS = (
        WireField("r", "r"),
        WireField("s", "s"),
        WireField("v", "v"),
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Signature":
        return cls(r=data.get("r"), s=data.get("s"), v=data.get("v"))


@dataclass(frozen=True)
class ExchangeRequest(WireRecord, Generic[A]):
    action: Optional[A] = None
    nonce: Optional[int] = None
    signature: Optional[Signature] = None
    vault_address: Optional[str] = None
    expires_after: Optional[int] = None

    WIRE_FIELDS = (
        WireField("action", "action"),
        WireField("nonce", "nonce"),
        WireField("signature", "signature"),
        WireField("vault_address", "vaultAddress", optional=True),
        WireField("expires_after", "expiresAfter", optional=True),
    )
