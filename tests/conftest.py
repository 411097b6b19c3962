"""Shared fixtures: a throwaway wallet, a deterministic signer and a fake transport."""

from __future__ import annotations

import pytest
from eth_account import Account

from hl_exchange.core.config import Config
from hl_exchange.execution.signer import L1Signer

TEST_KEY = "0x" + "11" * 32


class FixedNonces:
    """Nonce source yielding 1000, 1001, ..."""

    def __init__(self, start: int = 1000) -> None:
        self.value = start - 1

    def next_nonce(self) -> int:
        self.value += 1
        return self.value


class FakeAPI:
    """Stands in for ``hyperliquid.api.API``; records every post."""

    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.posts: list[tuple[str, dict]] = []
        self.response = response if response is not None else {"status": "ok"}
        self.error = error

    def post(self, url_path: str, payload: dict):
        self.posts.append((url_path, payload))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HL_NETWORK", "HL_ADDRESS", "HL_SECRET_KEY", "HL_VAULT_ADDRESS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def wallet():
    return Account.from_key(TEST_KEY)


@pytest.fixture
def signer(wallet) -> L1Signer:
    return L1Signer(wallet, is_mainnet=False, nonce_source=FixedNonces())


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()
