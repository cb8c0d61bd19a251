"""Configuration models for the depositor."""

from __future__ import annotations

from dataclasses import dataclass

# Deposit contract and gas limit are fixed for every submitted transaction.
DEPOSIT_CONTRACT_ADDRESS = "0x4242424242424242424242424242424242424242"
GAS_LIMIT = 300_000

WEI_PER_GWEI = 1_000_000_000


@dataclass
class DepositorConfig:
    """Complete depositor configuration."""

    # Chain
    rpc_url: str = ""
    private_key: str = ""  # loaded from env var PRIVATE_KEY
    abi_path: str = "abi.json"

    # Submission
    receipt_timeout: float = 600.0  # seconds
    receipt_poll_interval: float = 1.0  # seconds

    # Logging
    log_level: str = "info"
