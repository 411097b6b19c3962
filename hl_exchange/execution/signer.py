"""
Signing collaborator adapter.

Wraps the Hyperliquid SDK's L1 action signing: the msgpack encoding of the
action, followed by nonce, vault address and expiry, is hashed and signed as
an EIP-712 "Agent" message with an ``eth_account`` wallet.
"""

import logging
import threading
from typing import Optional

from eth_account.signers.local import LocalAccount
from hyperliquid.utils.signing import get_timestamp_ms, sign_l1_action

from hl_exchange.actions.envelope import ExchangeRequest, Signature
from hl_exchange.core.errors import MissingRequiredFieldError, SigningError
from hl_exchange.encoding.wire import signing_payload

logger = logging.getLogger(__name__)


class NonceSource:
    """Strictly increasing millisecond nonces, safe to share between threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._last = 0

    def next_nonce(self) -> int:
        with self._lock:
            nonce = max(get_timestamp_ms(), self._last + 1)
            self._last = nonce
            return nonce


class L1Signer:
    """Signs exchange requests with a local wallet."""

    def __init__(self, wallet: LocalAccount, is_mainnet: bool, nonce_source: Optional[NonceSource] = None):
        self.wallet = wallet
        self.is_mainnet = is_mainnet
        self.nonce_source = nonce_source or NonceSource()

    @property
    def address(self) -> str:
        return self.wallet.address

    def next_nonce(self) -> int:
        return self.nonce_source.next_nonce()

    def sign(self, req: ExchangeRequest) -> Signature:
        """
        Sign ``req`` (its ``signature`` field is ignored).

        Raises:
            MissingRequiredFieldError: nonce or any required action field unset
            SigningError: the wallet rejected the payload
        """
        if req.nonce is None:
            raise MissingRequiredFieldError("nonce")
        payload = signing_payload(req.action)
        try:
            raw = sign_l1_action(
                self.wallet,
                payload,
                req.vault_address,
                req.nonce,
                req.expires_after,
                self.is_mainnet,
            )
        except (TypeError, ValueError) as e:
            raise SigningError(f"failed to sign {payload.get('type')} action: {e}") from e
        logger.debug(f"[L1Signer] Signed {payload.get('type')} nonce={req.nonce}")
        return Signature.from_dict(raw)
