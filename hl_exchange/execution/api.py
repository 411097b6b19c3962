"""
Action-specific request facades.

Each facade owns one ``ExchangeRequest`` for one action type, created on the
first mutating call. List fields keep insertion order, since the exchange
answers ``orders``/``cancels``/``modifies`` positionally. Scalar setters
overwrite (last call wins). Nothing here validates values; that is left to
the exchange.
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar, Union

from hyperliquid.utils.types import Cloid

from hl_exchange.actions.cancel import Cancel, CancelAction, CancelByCloid, CancelByCloidAction
from hl_exchange.actions.envelope import ExchangeRequest
from hl_exchange.actions.leverage import UpdateLeverageAction
from hl_exchange.actions.modify import (
    BatchModifyAction,
    ModifyOption,
    build_modify,
    by_client_id,
    by_order_id,
)
from hl_exchange.actions.orders import BuilderFee, Grouping, Order, OrderAction
from hl_exchange.core.errors import ClientNotConfiguredError, MissingRequiredFieldError
from hl_exchange.encoding.wire import WireRecord

if TYPE_CHECKING:
    from hl_exchange.execution.client import ExchangeRestClient
    from hl_exchange.execution.signer import L1Signer

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=WireRecord)


class _ExchangeAPI(Generic[A]):
    """Shared envelope handling for every action facade."""

    def __init__(self, client: Optional["ExchangeRestClient"] = None):
        self.client = client
        self.req: Optional[ExchangeRequest[A]] = None

    def _new_action(self) -> A:
        raise NotImplementedError

    def _ensure_req(self) -> ExchangeRequest[A]:
        if self.req is None:
            self.req = ExchangeRequest(action=self._new_action())
        return self.req

    def _update(self, **changes: Any) -> None:
        self.req = replace(self._ensure_req(), **changes)

    def _update_action(self, **changes: Any) -> None:
        req = self._ensure_req()
        self.req = replace(req, action=replace(req.action, **changes))

    @property
    def action(self) -> Optional[A]:
        return self.req.action if self.req is not None else None

    # ------------------------
    # Envelope fields
    # ------------------------
    def nonce(self, nonce: int):
        self._update(nonce=nonce)
        return self

    def vault_address(self, vault_address: str):
        """Act on behalf of a vault or subaccount."""
        self._update(vault_address=vault_address)
        return self

    def expires_after(self, expires_after: int):
        """Absolute expiry (ms timestamp) after which the exchange rejects the request."""
        self._update(expires_after=expires_after)
        return self

    # ------------------------
    # Finalize / sign / submit
    # ------------------------
    def request(self) -> ExchangeRequest[A]:
        """The current envelope. Immutable, so safe to share."""
        if self.req is None:
            raise MissingRequiredFieldError("action")
        return self.req

    def sign(self, signer: Optional["L1Signer"] = None):
        """
        Sign the current envelope, drawing a nonce from the signer if none is set.

        A client-bound facade also picks up the client's default vault address
        and expiry. The facade keeps its previous envelope if signing fails.
        Any later mutation invalidates the signature; sign again before sending.
        """
        if signer is None:
            if self.client is None:
                raise ClientNotConfiguredError("sign() needs a signer or a client")
            signer = self.client.require_signer()
        req = self._ensure_req()
        if req.nonce is None:
            req = replace(req, nonce=signer.next_nonce())
        if self.client is not None:
            req = self.client.apply_defaults(req)
        self.req = replace(req, signature=signer.sign(req))
        return self

    def do(self) -> Any:
        """Sign with the client's signer and submit; returns the exchange response."""
        if self.client is None:
            raise ClientNotConfiguredError("do() needs a client")
        self.sign(self.client.require_signer())
        logger.debug(f"[{type(self).__name__}] Submitting nonce={self.req.nonce}")
        return self.client.post(self.req)


class ExchangeOrderAPI(_ExchangeAPI[OrderAction]):
    """Place one or more orders."""

    def _new_action(self) -> OrderAction:
        grouping = None
        if self.client is not None:
            grouping = self.client.config.request.default_grouping
        return OrderAction(grouping=grouping)

    def type(self, t: str) -> "ExchangeOrderAPI":
        self._update_action(type=t)
        return self

    def grouping(self, grouping: Grouping) -> "ExchangeOrderAPI":
        """How TP/SL orders attach to the parent: "na", "normalTpsl" or "positionTpsl"."""
        self._update_action(grouping=grouping)
        return self

    def builder(self, b: str, f: int) -> "ExchangeOrderAPI":
        """Route a builder fee of ``f`` tenths of a basis point to address ``b`` (stored lowercased)."""
        self._update_action(builder=BuilderFee(address=b, fee=f))
        return self

    def add_orders(self, *orders: Order) -> "ExchangeOrderAPI":
        current = self._ensure_req().action.orders or ()
        self._update_action(orders=current + tuple(orders))
        return self


class ExchangeCancelAPI(_ExchangeAPI[CancelAction]):
    """Cancel orders by exchange-assigned id."""

    def _new_action(self) -> CancelAction:
        return CancelAction()

    def add_cancel_order(self, cancel: Cancel) -> "ExchangeCancelAPI":
        current = self._ensure_req().action.cancels or ()
        self._update_action(cancels=current + (cancel,))
        return self


class ExchangeCancelByCloidAPI(_ExchangeAPI[CancelByCloidAction]):
    """Cancel orders by client order id."""

    def _new_action(self) -> CancelByCloidAction:
        return CancelByCloidAction()

    def add_cancel_by_cloid(self, cancel: CancelByCloid) -> "ExchangeCancelByCloidAPI":
        current = self._ensure_req().action.cancels or ()
        self._update_action(cancels=current + (cancel,))
        return self


class ExchangeBatchModifyAPI(_ExchangeAPI[BatchModifyAction]):
    """
    Replace resting orders in one request.

        api.add_modify(api.oid_option(123, new_order))
        api.add_modify(api.cloid_option("0x...", other_order))
    """

    def _new_action(self) -> BatchModifyAction:
        return BatchModifyAction()

    def oid_option(self, oid: int, order: Order) -> ModifyOption:
        return by_order_id(oid, order)

    def cloid_option(self, cloid: Union[str, Cloid], order: Order) -> ModifyOption:
        return by_client_id(cloid, order)

    def add_modify(self, *options: ModifyOption) -> "ExchangeBatchModifyAPI":
        """Append one Modify built from ``options`` applied in order."""
        current = self._ensure_req().action.modifies or ()
        self._update_action(modifies=current + (build_modify(*options),))
        return self


class ExchangeUpdateLeverageAPI(_ExchangeAPI[UpdateLeverageAction]):
    """Change leverage and margin mode for one asset."""

    def _new_action(self) -> UpdateLeverageAction:
        return UpdateLeverageAction()

    def asset(self, asset: int) -> "ExchangeUpdateLeverageAPI":
        self._update_action(asset=asset)
        return self

    def is_cross(self, is_cross: bool) -> "ExchangeUpdateLeverageAPI":
        self._update_action(is_cross=is_cross)
        return self

    def leverage(self, leverage: int) -> "ExchangeUpdateLeverageAPI":
        self._update_action(leverage=leverage)
        return self
