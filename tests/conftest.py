"""Shared test fixtures for the light-wallet test suite."""

from __future__ import annotations

from typing import Any

import pytest

from light_wallet.engine.models import AddressRecipient, PendingTransaction

_RAW = bytes.fromhex("0500008085202f89")
_RAW_ID = bytes.fromhex("ab" * 32)


@pytest.fixture
def app_config():
    """Provide a test AppConfig with a small confirmation depth."""
    from light_wallet.config.settings import AppConfig, ChainConfig

    return AppConfig(
        debug=True,
        chain=ChainConfig(stale_tolerance=10, default_fee=1_000),
    )


@pytest.fixture
def make_tx():
    """Factory for PendingTransaction snapshots with sensible defaults."""

    def _make(**overrides: Any) -> PendingTransaction:
        fields: dict[str, Any] = {
            "value": 50_000,
            "recipient": AddressRecipient(address="zs1testrecipient"),
            "account_index": 0,
            "create_time": 1_700_000_000.0,
        }
        fields.update(overrides)
        return PendingTransaction(**fields)

    return _make


@pytest.fixture
def submitted_tx(make_tx):
    """Encoded and accepted by the network, not mined, no expiry (example D)."""
    return make_tx(
        id=7,
        raw=_RAW,
        raw_transaction_id=_RAW_ID,
        encode_attempts=1,
        submit_attempts=1,
    )
