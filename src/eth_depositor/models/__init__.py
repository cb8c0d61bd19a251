"""Data models for eth_depositor."""

from eth_depositor.models.config import (
    DEPOSIT_CONTRACT_ADDRESS,
    GAS_LIMIT,
    WEI_PER_GWEI,
    DepositorConfig,
)
from eth_depositor.models.records import (
    DepositData,
    DepositRecord,
    PendingTransaction,
    SignedDeposit,
    SubmissionResult,
)

__all__ = [
    "DEPOSIT_CONTRACT_ADDRESS", "GAS_LIMIT", "WEI_PER_GWEI", "DepositorConfig",
    "DepositData", "DepositRecord", "PendingTransaction", "SignedDeposit",
    "SubmissionResult",
]
