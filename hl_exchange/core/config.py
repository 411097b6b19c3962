"""
Configuration management for the exchange request client.

Supports loading from YAML/dicts and environment variable overrides.
"""

import os
from dataclasses import dataclass, field
from typing import Literal, Optional


@dataclass
class HyperliquidConfig:
    """Hyperliquid-specific settings."""

    network: Literal["testnet", "mainnet"] = "testnet"
    address: str = ""  # Main wallet address (from env)
    secret_key: str = ""  # API wallet private key (from env)
    vault_address: Optional[str] = None  # Trade on behalf of a vault/subaccount

    # API endpoint (auto-set by network)
    api_url: str = ""

    def __post_init__(self):
        """Set API URL based on network."""
        from hyperliquid.utils import constants

        if self.network == "testnet":
            self.api_url = constants.TESTNET_API_URL
        else:
            self.api_url = constants.MAINNET_API_URL

    @property
    def is_mainnet(self) -> bool:
        return self.network == "mainnet"


@dataclass
class RequestConfig:
    """Defaults applied to requests submitted through a client."""

    expires_after_ms: Optional[int] = None  # Relative expiry; None = never expires
    default_grouping: Optional[Literal["na", "normalTpsl", "positionTpsl"]] = None
    timeout: Optional[float] = 10.0  # HTTP timeout (seconds)


@dataclass
class MonitoringConfig:
    """Logging."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@dataclass
class Config:
    """
    Complete client configuration.

    Environment variables (override config file):
    - HL_NETWORK: "testnet" or "mainnet"
    - HL_ADDRESS: Main wallet address
    - HL_SECRET_KEY: API wallet private key
    - HL_VAULT_ADDRESS: Vault/subaccount to act for
    """

    hyperliquid: HyperliquidConfig = field(default_factory=HyperliquidConfig)
    request: RequestConfig = field(default_factory=RequestConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    def __post_init__(self):
        """Load environment variable overrides."""
        if os.getenv("HL_NETWORK"):
            self.hyperliquid.network = os.getenv("HL_NETWORK", "testnet")

        if os.getenv("HL_ADDRESS"):
            self.hyperliquid.address = os.getenv("HL_ADDRESS", "")

        if os.getenv("HL_SECRET_KEY"):
            self.hyperliquid.secret_key = os.getenv("HL_SECRET_KEY", "")

        if os.getenv("HL_VAULT_ADDRESS"):
            self.hyperliquid.vault_address = os.getenv("HL_VAULT_ADDRESS")

        # Re-initialize to set API URL
        self.hyperliquid.__post_init__()

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load config from YAML file."""
        import yaml

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Load config from dictionary."""
        from dataclasses import is_dataclass, fields

        def build(dc_type, data):
            if not is_dataclass(dc_type):
                return data
            kwargs = {}
            for f in fields(dc_type):
                if f.name in data:
                    val = data[f.name]
                    sub_type = f.default_factory if is_dataclass(f.default_factory) else None
                    if sub_type is not None and isinstance(val, dict):
                        kwargs[f.name] = build(sub_type, val)
                    else:
                        kwargs[f.name] = val
            return dc_type(**kwargs)

        return build(cls, data)

    def validate(self) -> list[str]:
        """
        Validate configuration parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.hyperliquid.network not in ("testnet", "mainnet"):
            errors.append("hyperliquid.network must be 'testnet' or 'mainnet'")

        if not self.hyperliquid.secret_key:
            errors.append("HL_SECRET_KEY environment variable required")

        if self.request.expires_after_ms is not None and self.request.expires_after_ms <= 0:
            errors.append("request.expires_after_ms must be > 0")

        if self.request.default_grouping not in (None, "na", "normalTpsl", "positionTpsl"):
            errors.append("request.default_grouping must be one of na/normalTpsl/positionTpsl")

        if self.request.timeout is not None and self.request.timeout <= 0:
            errors.append("request.timeout must be > 0")

        return errors
