"""
Exchange REST client.

Hands finalized, signed envelopes to the Hyperliquid ``/exchange`` endpoint
through the SDK's HTTP layer and returns the parsed response. No retries:
resending a trading instruction is a decision for the caller.
"""

import logging
from dataclasses import replace
from typing import Any, Optional

import requests
from eth_account import Account
from eth_account.signers.local import LocalAccount
from hyperliquid.api import API
from hyperliquid.utils.error import ClientError, ServerError
from hyperliquid.utils.signing import get_timestamp_ms

from hl_exchange.actions.envelope import ExchangeRequest
from hl_exchange.core.config import Config
from hl_exchange.core.errors import ClientNotConfiguredError, TransportError
from hl_exchange.encoding.wire import encode_structured, to_wire
from hl_exchange.execution.api import (
    ExchangeBatchModifyAPI,
    ExchangeCancelAPI,
    ExchangeCancelByCloidAPI,
    ExchangeOrderAPI,
    ExchangeUpdateLeverageAPI,
)
from hl_exchange.execution.signer import L1Signer

logger = logging.getLogger(__name__)

EXCHANGE_PATH = "/exchange"


class ExchangeRestClient:
    """
    Factory for action facades plus the transport they submit through.

        client = ExchangeRestClient(Config())
        resp = client.order().add_orders(order).do()
    """

    def __init__(
        self,
        config: Config,
        wallet: Optional[LocalAccount] = None,
        api: Optional[API] = None,
        signer: Optional[L1Signer] = None,
    ):
        """
        Args:
            config: Client configuration
            wallet: Signing wallet; derived from ``config.hyperliquid.secret_key`` if omitted
            api: SDK HTTP client (anything with ``post(url_path, payload)``)
            signer: Overrides the wallet-based signer
        """
        self.config = config
        self.api = api or API(config.hyperliquid.api_url, timeout=config.request.timeout)
        if signer is None:
            if wallet is None and config.hyperliquid.secret_key:
                wallet = Account.from_key(config.hyperliquid.secret_key)
            if wallet is not None:
                signer = L1Signer(wallet, is_mainnet=config.hyperliquid.is_mainnet)
        self.signer = signer

    # ------------------------
    # Facades
    # ------------------------
    def order(self) -> ExchangeOrderAPI:
        return ExchangeOrderAPI(self)

    def cancel(self) -> ExchangeCancelAPI:
        return ExchangeCancelAPI(self)

    def cancel_by_cloid(self) -> ExchangeCancelByCloidAPI:
        return ExchangeCancelByCloidAPI(self)

    def batch_modify(self) -> ExchangeBatchModifyAPI:
        return ExchangeBatchModifyAPI(self)

    def update_leverage(self) -> ExchangeUpdateLeverageAPI:
        return ExchangeUpdateLeverageAPI(self)

    # ------------------------
    # Signing / transport
    # ------------------------
    def require_signer(self) -> L1Signer:
        if self.signer is None:
            raise ClientNotConfiguredError("no wallet configured; set HL_SECRET_KEY or pass wallet=")
        return self.signer

    def apply_defaults(self, req: ExchangeRequest) -> ExchangeRequest:
        """Fill vault address and expiry from config where the request leaves them unset."""
        changes = {}
        if req.vault_address is None and self.config.hyperliquid.vault_address:
            changes["vault_address"] = self.config.hyperliquid.vault_address
        if req.expires_after is None and self.config.request.expires_after_ms is not None:
            base = req.nonce if req.nonce is not None else get_timestamp_ms()
            changes["expires_after"] = base + self.config.request.expires_after_ms
        return replace(req, **changes) if changes else req

    def post(self, req: ExchangeRequest) -> Any:
        """
        Submit a signed envelope.

        Raises:
            MissingRequiredFieldError: envelope incomplete (e.g. never signed)
            TransportError: HTTP failure or exchange error status
        """
        payload = to_wire(req)
        action_type = payload["action"].get("type")
        logger.debug(f"[ExchangeRestClient] POST {EXCHANGE_PATH} {encode_structured(req)}")
        try:
            resp = self.api.post(EXCHANGE_PATH, payload)
        except ClientError as e:
            raise TransportError(f"{action_type} rejected: {e.error_message}", e.status_code) from e
        except ServerError as e:
            raise TransportError(f"{action_type} server error: {e.message}", e.status_code) from e
        except requests.RequestException as e:
            raise TransportError(f"{action_type} request failed: {e}") from e
        logger.info(f"[ExchangeRestClient] {action_type} submitted (nonce={req.nonce})")
        return resp
