"""Shared fixtures for eth_depositor tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from eth_depositor.models.config import DepositorConfig
from eth_depositor.submitter import DepositSubmitter

from tests.mocks import MockChainClient, MockConfirmer

# Well-known development key (first account of the default hardhat/anvil mnemonic)
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

ABI_PATH = Path(__file__).resolve().parent.parent / "abi.json"


def make_test_config(**overrides) -> DepositorConfig:
    """Build a DepositorConfig suitable for testing."""
    defaults = dict(
        rpc_url="http://127.0.0.1:8545",
        private_key=TEST_PRIVATE_KEY,
        abi_path=str(ABI_PATH),
        receipt_timeout=5.0,
        receipt_poll_interval=0.01,
        log_level="debug",
    )
    defaults.update(overrides)
    return DepositorConfig(**defaults)


@pytest.fixture
def test_config():
    """Default DepositorConfig for tests."""
    return make_test_config()


CONFIG_ENV_VARS = ("RPC_URL", "PRIVATE_KEY", "DEPOSIT_ABI_PATH", "RECEIPT_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the config loader reads."""
    for key in CONFIG_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes os.environ directly, outside monkeypatch
    for key in CONFIG_ENV_VARS:
        os.environ.pop(key, None)


@pytest.fixture
def mock_chain():
    return MockChainClient(address=TEST_ADDRESS)


@pytest.fixture
def mock_confirmer():
    return MockConfirmer(answer=True)


@pytest.fixture
def results():
    """Collects results passed to the submitter's on_result callback."""
    return []


@pytest.fixture
def submitter(test_config, mock_chain, mock_confirmer, results):
    """DepositSubmitter wired to mocked chain and confirmer."""
    return DepositSubmitter(test_config, mock_chain, mock_confirmer, on_result=results.append)
