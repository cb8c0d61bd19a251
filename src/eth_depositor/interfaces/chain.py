"""ChainClient protocol - everything the submitter needs from the chain."""

from __future__ import annotations

from typing import Any, Protocol

from eth_depositor.models.records import DepositData, PendingTransaction, SignedDeposit


class ChainClient(Protocol):
    """Node queries, ABI encoding, signing and broadcast for deposit transactions."""

    @property
    def address(self) -> str:
        """Checksummed sender address derived from the configured key."""
        ...

    async def close(self) -> None:
        ...

    async def get_chain_id(self) -> int:
        ...

    async def get_pending_nonce(self, address: str) -> int:
        """Next nonce for address, counting pending transactions."""
        ...

    async def suggest_priority_fee(self) -> int:
        ...

    async def suggest_max_fee(self) -> int:
        ...

    def encode_deposit_call(self, data: DepositData) -> str:
        """ABI-encode deposit(pubkey, withdrawal_credentials, signature, root)."""
        ...

    def sign_transaction(self, tx: PendingTransaction) -> SignedDeposit:
        ...

    async def send_raw_transaction(self, signed: SignedDeposit) -> str:
        """Broadcast and return the transaction hash."""
        ...

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float, poll_interval: float
    ) -> dict[str, Any] | None:
        """Block until mined. Returns None if timeout elapses first."""
        ...
