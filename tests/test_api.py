"""
Tests for the per-action facades.

Facades run offline here: no client is attached unless a test needs one.
"""

from __future__ import annotations

import pytest

from hl_exchange.actions.cancel import Cancel, CancelByCloid
from hl_exchange.actions.modify import by_client_id, by_order_id
from hl_exchange.actions.orders import BuilderFee, OrderBuilder
from hl_exchange.core.errors import ClientNotConfiguredError, MissingRequiredFieldError
from hl_exchange.encoding.wire import to_wire
from hl_exchange.execution.api import (
    ExchangeBatchModifyAPI,
    ExchangeCancelAPI,
    ExchangeCancelByCloidAPI,
    ExchangeOrderAPI,
    ExchangeUpdateLeverageAPI,
)

CLOID_A = "0x" + "0a" * 16
CLOID_B = "0x" + "0b" * 16


def _order(px: str):
    return OrderBuilder().asset(0).is_buy(True).price(px).size("1").reduce_only(False).limit_tif("Gtc").build()


def test_request_lazily_created_on_first_mutation() -> None:
    api = ExchangeOrderAPI()
    assert api.req is None
    assert api.action is None
    with pytest.raises(MissingRequiredFieldError):
        api.request()

    api.grouping("na")
    assert api.req is not None
    assert api.action.orders is None
    assert api.action.type == "order"


@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_add_orders_preserves_call_order(n: int) -> None:
    api = ExchangeOrderAPI()
    prices = [str(100 + i) for i in range(n)]
    for px in prices:
        api.add_orders(_order(px))
    api.add_orders()
    wire = to_wire(api.request().action)
    assert [o["p"] for o in wire["orders"]] == prices


def test_add_orders_variadic_keeps_argument_order() -> None:
    api = ExchangeOrderAPI().add_orders(_order("1"), _order("2")).add_orders(_order("3"))
    assert [o.price for o in api.action.orders] == ["1", "2", "3"]


def test_order_scalars_last_write_wins() -> None:
    api = (
        ExchangeOrderAPI()
        .type("order")
        .grouping("na")
        .grouping("positionTpsl")
        .builder("0xaaa", 5)
        .builder("0xbbb", 10)
    )
    action = api.request().action
    assert action.grouping == "positionTpsl"
    assert action.builder == BuilderFee(address="0xbbb", fee=10)


def test_finalized_request_unaffected_by_later_calls() -> None:
    api = ExchangeOrderAPI().add_orders(_order("1")).nonce(1)
    snapshot = api.request()
    api.add_orders(_order("2")).nonce(2).vault_address("0xv")
    assert len(snapshot.action.orders) == 1
    assert snapshot.nonce == 1
    assert snapshot.vault_address is None
    assert len(api.request().action.orders) == 2


@pytest.mark.parametrize("n", [0, 1, 3])
def test_cancels_preserve_call_order(n: int) -> None:
    api = ExchangeCancelAPI()
    for oid in range(n):
        api.add_cancel_order(Cancel(asset=1, oid=oid))
    if n == 0:
        assert api.req is None
        return
    wire = to_wire(api.request().action)
    assert wire["type"] == "cancel"
    assert [c["o"] for c in wire["cancels"]] == list(range(n))


def test_cancel_by_cloid_accumulates() -> None:
    api = ExchangeCancelByCloidAPI()
    api.add_cancel_by_cloid(CancelByCloid(asset=1, cloid=CLOID_A))
    api.add_cancel_by_cloid(CancelByCloid(asset=2, cloid=CLOID_B))
    wire = to_wire(api.request().action)
    assert wire == {
        "type": "cancelByCloid",
        "cancels": [{"asset": 1, "cloid": CLOID_A}, {"asset": 2, "cloid": CLOID_B}],
    }


def test_batch_modify_identifier_polymorphism() -> None:
    api = ExchangeBatchModifyAPI()
    api.add_modify(api.oid_option(11, _order("1")))
    api.add_modify(api.cloid_option(CLOID_A, _order("2")))
    first, second = api.request().action.modifies

    assert first.order_id == 11
    assert first.client_id is None
    assert second.client_id == CLOID_A
    assert second.order_id is None
    assert [m["oid"] for m in to_wire(api.request().action)["modifies"]] == [11, CLOID_A]


def test_batch_modify_later_identifier_wins() -> None:
    api = ExchangeBatchModifyAPI()
    api.add_modify(by_order_id(11, _order("1")), by_client_id(CLOID_B, _order("2")))
    (modify,) = api.request().action.modifies
    assert modify.oid == CLOID_B
    assert modify.order.price == "2"


def test_batch_modify_without_options_is_incomplete() -> None:
    api = ExchangeBatchModifyAPI().add_modify()
    (modify,) = api.request().action.modifies
    assert modify.oid is None
    assert modify.order_id is None
    with pytest.raises(MissingRequiredFieldError):
        to_wire(api.request().action)


def test_update_leverage_scalars() -> None:
    api = ExchangeUpdateLeverageAPI().asset(3).is_cross(True).leverage(10).leverage(0).is_cross(False)
    assert to_wire(api.request().action) == {
        "type": "updateLeverage",
        "asset": 3,
        "isCross": False,
        "leverage": 0,
    }


def test_sign_fills_nonce_and_signature(signer) -> None:
    api = ExchangeCancelAPI().add_cancel_order(Cancel(asset=1, oid=2)).sign(signer)
    req = api.request()
    assert req.nonce == 1000
    assert req.signature is not None
    assert to_wire(req)["signature"]["v"] in (27, 28)


def test_sign_keeps_explicit_nonce(signer) -> None:
    req = ExchangeCancelAPI().add_cancel_order(Cancel(asset=1, oid=2)).nonce(77).sign(signer).request()
    assert req.nonce == 77


def test_sign_and_do_need_signer_or_client() -> None:
    api = ExchangeCancelAPI().add_cancel_order(Cancel(asset=1, oid=2))
    with pytest.raises(ClientNotConfiguredError):
        api.sign()
    with pytest.raises(ClientNotConfiguredError):
        api.do()


def test_builder_fee_address_lowercased() -> None:
    checksummed = "0xAbCdEf0123456789aBcDeF0123456789ABCDEF01"
    api = ExchangeOrderAPI().add_orders(_order("1")).builder(checksummed, 10)
    assert to_wire(api.request().action)["builder"] == {"b": checksummed.lower(), "f": 10}
    assert BuilderFee(address=checksummed, fee=1).address == checksummed.lower()
