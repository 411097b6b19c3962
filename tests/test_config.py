"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from hyperliquid.utils import constants

from hl_exchange.core.config import Config


def test_defaults_use_testnet() -> None:
    config = Config()
    assert config.hyperliquid.network == "testnet"
    assert config.hyperliquid.api_url == constants.TESTNET_API_URL
    assert config.hyperliquid.is_mainnet is False
    assert config.request.expires_after_ms is None
    assert config.monitoring.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HL_NETWORK", "mainnet")
    monkeypatch.setenv("HL_ADDRESS", "0xabc")
    monkeypatch.setenv("HL_SECRET_KEY", "0xkey")
    monkeypatch.setenv("HL_VAULT_ADDRESS", "0xvault")
    config = Config()
    assert config.hyperliquid.api_url == constants.MAINNET_API_URL
    assert config.hyperliquid.address == "0xabc"
    assert config.hyperliquid.secret_key == "0xkey"
    assert config.hyperliquid.vault_address == "0xvault"


def test_from_dict_builds_nested_sections() -> None:
    config = Config.from_dict({
        "hyperliquid": {"network": "mainnet"},
        "request": {"expires_after_ms": 30_000},
        "monitoring": {"log_level": "DEBUG"},
    })
    assert config.hyperliquid.is_mainnet
    assert config.request.expires_after_ms == 30_000
    assert config.request.timeout == 10.0
    assert config.monitoring.log_level == "DEBUG"


def test_from_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("hyperliquid:\n  network: mainnet\nrequest:\n  default_grouping: na\n")
    config = Config.from_yaml(str(path))
    assert config.hyperliquid.api_url == constants.MAINNET_API_URL
    assert config.request.default_grouping == "na"


def test_from_yaml_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Config.from_yaml(str(path)).hyperliquid.network == "testnet"


def test_validate_reports_errors() -> None:
    config = Config.from_dict({"request": {"expires_after_ms": 0, "default_grouping": "bogus", "timeout": -1}})
    errors = config.validate()
    assert any("HL_SECRET_KEY" in e for e in errors)
    assert any("expires_after_ms" in e for e in errors)
    assert any("default_grouping" in e for e in errors)
    assert any("timeout" in e for e in errors)


def test_validate_passes_with_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HL_SECRET_KEY", "0xkey")
    assert Config().validate() == []
