"""Core components: config, logging, errors."""

from hl_exchange.core.config import Config
from hl_exchange.core.errors import (
    HLExchangeError,
    EncodingError,
    MissingRequiredFieldError,
    InvalidOrderTypeError,
    SigningError,
    TransportError,
    ClientNotConfiguredError,
)
from hl_exchange.core.log import setup_logging

__all__ = [
    "Config",
    "setup_logging",
    "HLExchangeError",
    "EncodingError",
    "MissingRequiredFieldError",
    "InvalidOrderTypeError",
    "SigningError",
    "TransportError",
    "ClientNotConfiguredError",
]
