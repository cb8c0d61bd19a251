"""Mock implementations of the chain client and operator confirmation."""

from __future__ import annotations

from typing import Any

from eth_depositor.models.records import DepositData, PendingTransaction, SignedDeposit

DEPOSIT_SELECTOR = "0x22895118"


class MockChainClient:
    """Implements ChainClient protocol. Records every call by method name."""

    def __init__(
        self,
        address: str = "0x0000000000000000000000000000000000000001",
        chain_id: int = 1337,
        start_nonce: int = 0,
        priority_fee: int = 1_000_000_000,
        max_fee: int = 30_000_000_000,
        fail_on: str | None = None,
        receipt_status: int = 1,
        pending: bool = False,
    ) -> None:
        self._address = address
        self.chain_id = chain_id
        self.nonce = start_nonce
        self.priority_fee = priority_fee
        self.max_fee = max_fee
        self.fail_on = fail_on
        self.receipt_status = receipt_status
        self.pending = pending

        self.calls: list[str] = []
        self.signed: list[PendingTransaction] = []
        self.sent: list[SignedDeposit] = []
        self.closed = False

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise RuntimeError(f"mock {name} failure")

    @property
    def address(self) -> str:
        return self._address

    async def close(self) -> None:
        self.closed = True

    async def get_chain_id(self) -> int:
        self._record("get_chain_id")
        return self.chain_id

    async def get_pending_nonce(self, address: str) -> int:
        self._record("get_pending_nonce")
        return self.nonce

    async def suggest_priority_fee(self) -> int:
        self._record("suggest_priority_fee")
        return self.priority_fee

    async def suggest_max_fee(self) -> int:
        self._record("suggest_max_fee")
        return self.max_fee

    def encode_deposit_call(self, data: DepositData) -> str:
        self._record("encode_deposit_call")
        return DEPOSIT_SELECTOR + data.pubkey.hex()

    def sign_transaction(self, tx: PendingTransaction) -> SignedDeposit:
        self._record("sign_transaction")
        self.signed.append(tx)
        return SignedDeposit(
            raw_transaction=b"\x02" + tx.nonce.to_bytes(8, "big"),
            tx_hash=f"0x{tx.nonce + 1:064x}",
        )

    async def send_raw_transaction(self, signed: SignedDeposit) -> str:
        self._record("send_raw_transaction")
        self.sent.append(signed)
        self.nonce += 1
        return signed.tx_hash

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float, poll_interval: float
    ) -> dict[str, Any] | None:
        self._record("wait_for_receipt")
        if self.pending:
            return None
        return {
            "transactionHash": tx_hash,
            "blockNumber": 100 + len(self.sent),
            "status": self.receipt_status,
            "gasUsed": 52_000,
        }

    def calls_for(self, name: str) -> int:
        """Test helper: number of calls made to a method."""
        return self.calls.count(name)


class MockConfirmer:
    """Implements Confirmer protocol with a fixed (or scripted) answer."""

    def __init__(self, answer: bool = True, answers: list[bool] | None = None) -> None:
        self.answer = answer
        self._answers = list(answers) if answers is not None else None
        self.shown: list[PendingTransaction] = []

    def confirm(self, tx: PendingTransaction) -> bool:
        self.shown.append(tx)
        if self._answers is not None:
            return self._answers.pop(0)
        return self.answer
