"""
Command-line entry point.

Builds a single exchange action from flags and either prints its encodings
(default) or signs and submits it (``--send``).
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from hl_exchange.actions.cancel import Cancel
from hl_exchange.actions.orders import (
    GROUPING_NA,
    GROUPING_NORMAL_TPSL,
    GROUPING_POSITION_TPSL,
    TIF_GTC,
    TIF_IOC,
    TIF_POST_ONLY,
    OrderBuilder,
)
from hl_exchange.core.config import Config
from hl_exchange.core.errors import HLExchangeError
from hl_exchange.core.log import setup_logging
from hl_exchange.encoding.wire import encode_binary, encode_structured
from hl_exchange.execution.client import ExchangeRestClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hl-exchange", description="Build and submit Hyperliquid exchange actions")
    parser.add_argument("--config", type=str, default="", help="Path to YAML config file")
    parser.add_argument("--send", action="store_true", help="Sign and submit instead of printing encodings")
    parser.add_argument("--vault", type=str, default=None, help="Vault/subaccount address")
    parser.add_argument("--expires-after", type=int, default=None, help="Absolute expiry (ms timestamp)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_order = sub.add_parser("order", help="Place one order")
    p_order.add_argument("--asset", type=int, required=True)
    side = p_order.add_mutually_exclusive_group(required=True)
    side.add_argument("--buy", dest="is_buy", action="store_true")
    side.add_argument("--sell", dest="is_buy", action="store_false")
    p_order.add_argument("--price", type=str, required=True)
    p_order.add_argument("--size", type=str, required=True)
    p_order.add_argument("--tif", type=str, default=TIF_GTC, choices=[TIF_POST_ONLY, TIF_IOC, TIF_GTC])
    p_order.add_argument("--trigger", type=str, default=None, help="Trigger price; makes this a TP/SL order")
    p_order.add_argument("--tpsl", type=str, default="sl", choices=["tp", "sl"])
    p_order.add_argument("--market", action="store_true", help="Trigger executes as market")
    p_order.add_argument("--reduce-only", action="store_true")
    p_order.add_argument("--cloid", type=str, default=None)
    p_order.add_argument("--grouping", type=str, default=None, choices=[GROUPING_NA, GROUPING_NORMAL_TPSL, GROUPING_POSITION_TPSL])

    p_cancel = sub.add_parser("cancel", help="Cancel one order by id")
    p_cancel.add_argument("--asset", type=int, required=True)
    p_cancel.add_argument("--oid", type=int, required=True)

    p_lev = sub.add_parser("leverage", help="Update leverage for one asset")
    p_lev.add_argument("--asset", type=int, required=True)
    p_lev.add_argument("--leverage", type=int, required=True)
    p_lev.add_argument("--cross", action="store_true", help="Cross margin (default isolated)")
    return parser


def build_api(client: ExchangeRestClient, args: argparse.Namespace):
    """Translate parsed flags into a populated facade."""
    if args.command == "order":
        ob = (
            OrderBuilder()
            .asset(args.asset)
            .is_buy(args.is_buy)
            .price(args.price)
            .size(args.size)
            .reduce_only(args.reduce_only)
        )
        if args.trigger is not None:
            ob.trigger(args.market, args.trigger, args.tpsl)
        else:
            ob.limit_tif(args.tif)
        if args.cloid:
            ob.client_order_id(args.cloid)
        api = client.order().add_orders(ob.build())
        if args.grouping:
            api.grouping(args.grouping)
    elif args.command == "cancel":
        api = client.cancel().add_cancel_order(Cancel(asset=args.asset, oid=args.oid))
    else:
        api = client.update_leverage().asset(args.asset).is_cross(args.cross).leverage(args.leverage)

    if args.vault:
        api.vault_address(args.vault)
    if args.expires_after is not None:
        api.expires_after(args.expires_after)
    return api


def main(argv=None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    # Load .env if present (before Config) to populate HL_* variables
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    config = Config.from_yaml(args.config) if args.config else Config()
    setup_logging(config)

    try:
        client = ExchangeRestClient(config)
        api = build_api(client, args)
        if args.send:
            errors = config.validate()
            if errors:
                for err in errors:
                    logger.error(f"[Main] {err}")
                return 1
            resp = api.do()
            print(json.dumps(resp, indent=2))
            return 0

        action = api.request().action
        print(f"action (json):    {encode_structured(action)}")
        print(f"action (msgpack): {encode_binary(action).hex()}")
        if client.signer is not None:
            req = api.sign().request()
            print(f"request (json):   {encode_structured(req)}")
        return 0
    except HLExchangeError as e:
        logger.error(f"[Main] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
