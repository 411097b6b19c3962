"""Structured (JSON) and binary (msgpack) wire encodings."""

from hl_exchange.encoding.wire import encode_binary, encode_structured, signing_payload, to_wire

__all__ = ["encode_binary", "encode_structured", "signing_payload", "to_wire"]
