"""Deposit records, pending transactions and submission results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_depositor.models.config import WEI_PER_GWEI


@dataclass
class DepositRecord:
    """One entry of a deposit-data file, fields as found in the JSON."""

    amount: int  # gwei
    pubkey: str
    withdrawal_credentials: str
    signature: str
    deposit_data_root: str


@dataclass
class DepositData:
    """A DepositRecord with its hex fields decoded and length-checked."""

    amount_gwei: int
    pubkey: bytes  # 48 bytes
    withdrawal_credentials: bytes  # 32 bytes
    signature: bytes  # 96 bytes
    deposit_data_root: bytes  # 32 bytes

    @property
    def amount_wei(self) -> int:
        return self.amount_gwei * WEI_PER_GWEI


@dataclass
class PendingTransaction:
    """An EIP-1559 deposit transaction, built but not yet signed."""

    chain_id: int
    sender: str
    nonce: int
    max_priority_fee_per_gas: int  # wei
    max_fee_per_gas: int  # wei
    gas: int
    to: str
    value: int  # wei
    data: str  # 0x-prefixed call data

    def to_tx_dict(self) -> dict[str, Any]:
        """Return the dict handed to the signer."""
        return {
            "type": 2,
            "chainId": self.chain_id,
            "nonce": self.nonce,
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "maxFeePerGas": self.max_fee_per_gas,
            "gas": self.gas,
            "to": self.to,
            "value": self.value,
            "data": self.data,
        }

    def describe(self) -> dict[str, Any]:
        """Human-readable view shown to the operator before signing."""
        return {
            "type": "0x2",
            "chainId": self.chain_id,
            "from": self.sender,
            "nonce": self.nonce,
            "to": self.to,
            "gas": self.gas,
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "maxFeePerGas": self.max_fee_per_gas,
            "value": str(self.value),
            "valueEth": f"{self.value / 10**18:.9f}",
            "input": self.data,
        }


@dataclass
class SignedDeposit:
    """Raw signed transaction bytes and their hash."""

    raw_transaction: bytes
    tx_hash: str


@dataclass
class SubmissionResult:
    """Outcome of one submitted deposit."""

    index: int
    status: str  # "mined", "reverted", "pending"
    tx_hash: str
    receipt: dict[str, Any] | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == "mined"
