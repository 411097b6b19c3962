"""
Dual-format wire encoding.

Every request record declares its wire fields once (``WIRE_FIELDS``). A single
reduction, :func:`to_wire`, walks those declarations and produces a plain
``dict``/``list``/scalar tree; both the structured (JSON) encoding used for
transport and the binary (msgpack) encoding used for signing are derived from
that one tree, so optional-field presence cannot differ between them.
"""

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

import msgpack

from hl_exchange.core.errors import MissingRequiredFieldError


@dataclass(frozen=True)
class WireField:
    """Maps a record attribute to its wire key."""

    attr: str
    key: str
    optional: bool = False  # omitted from both encodings when None


class WireRecord:
    """Mixin for records that know their wire layout."""

    WIRE_FIELDS: ClassVar[Tuple[WireField, ...]] = ()

    def check_wire(self, path: str) -> None:
        """Hook for record-level invariants; raise an EncodingError to reject."""

    def to_wire(self, path: str = "") -> Dict[str, Any]:
        return to_wire(self, path)


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def to_wire(value: Any, path: str = "") -> Any:
    """
    Reduce a record tree to plain Python containers.

    Keys are emitted in ``WIRE_FIELDS`` declaration order and sequence order is
    preserved, so equal values always reduce to equal trees.

    Raises:
        MissingRequiredFieldError: a non-optional field holds ``None``
    """
    if isinstance(value, WireRecord):
        value.check_wire(path)
        out: Dict[str, Any] = {}
        for f in value.WIRE_FIELDS:
            v = getattr(value, f.attr)
            if v is None:
                if f.optional:
                    continue
                raise MissingRequiredFieldError(_child(path, f.key))
            out[f.key] = to_wire(v, _child(path, f.key))
        return out
    if isinstance(value, (list, tuple)):
        return [to_wire(item, f"{path}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, dict):
        return {k: to_wire(v, _child(path, str(k))) for k, v in value.items()}
    return value


def encode_structured(value: Any) -> str:
    """JSON text of ``value`` as sent to the exchange."""
    return json.dumps(to_wire(value), separators=(",", ":"), ensure_ascii=False)


def encode_binary(value: Any) -> bytes:
    """Compact msgpack encoding of ``value``, the form that gets signed."""
    return msgpack.packb(to_wire(value), use_bin_type=True)


def signing_payload(action: Any) -> Dict[str, Any]:
    """Wire tree of an action, as handed to the signing collaborator."""
    return to_wire(action, "action")
