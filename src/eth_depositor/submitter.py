"""Deposit submitter - builds, confirms, signs and sends one transaction per record."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from eth_depositor.deposit.data import decode_record
from eth_depositor.errors import DepositDataError, SubmissionAborted
from eth_depositor.interfaces.chain import ChainClient
from eth_depositor.interfaces.confirmer import Confirmer
from eth_depositor.models.config import DEPOSIT_CONTRACT_ADDRESS, GAS_LIMIT, DepositorConfig
from eth_depositor.models.records import DepositRecord, PendingTransaction, SubmissionResult

log = logging.getLogger(__name__)


class DepositSubmitter:
    """Submits deposit records strictly in order.

    Each record goes built -> confirmed -> signed -> broadcast -> mined.
    Any failure raises SubmissionAborted and later records are never touched.
    A receipt that does not arrive within ``receipt_timeout`` is reported as
    "pending" and the batch continues with a freshly queried nonce.
    """

    def __init__(
        self,
        cfg: DepositorConfig,
        chain: ChainClient,
        confirmer: Confirmer,
        on_result: Callable[[SubmissionResult], None] | None = None,
    ) -> None:
        self._cfg = cfg
        self.chain = chain
        self.confirmer = confirmer
        self._on_result = on_result

    async def submit(self, records: Sequence[DepositRecord]) -> list[SubmissionResult]:
        """Submit every record, returning one result per record."""
        results: list[SubmissionResult] = []
        for index, record in enumerate(records):
            try:
                result = await self._submit_one(index, record)
            except SubmissionAborted as exc:
                exc.completed = list(results)
                log.debug("Batch stopped after %d of %d deposits", len(results), len(records))
                raise
            results.append(result)
            if self._on_result is not None:
                self._on_result(result)
        return results

    async def build_transaction(self, index: int, record: DepositRecord) -> PendingTransaction:
        """Query the chain and assemble the unsigned deposit transaction."""
        sender = self.chain.address

        try:
            chain_id = await self.chain.get_chain_id()
            log.info("Chain ID: %d", chain_id)
            nonce = await self.chain.get_pending_nonce(sender)
            priority_fee = await self.chain.suggest_priority_fee()
            max_fee = await self.chain.suggest_max_fee()
        except Exception as exc:
            raise SubmissionAborted(index, "chain query", str(exc)) from exc

        try:
            data = decode_record(record)
        except DepositDataError as exc:
            raise SubmissionAborted(index, "decode", str(exc)) from exc

        try:
            call_data = self.chain.encode_deposit_call(data)
        except Exception as exc:
            raise SubmissionAborted(index, "encode", f"Failed to pack arguments: {exc}") from exc

        tx = PendingTransaction(
            chain_id=chain_id,
            sender=sender,
            nonce=nonce,
            max_priority_fee_per_gas=priority_fee,
            max_fee_per_gas=max_fee,
            gas=GAS_LIMIT,
            to=DEPOSIT_CONTRACT_ADDRESS,
            value=data.amount_wei,
            data=call_data,
        )
        log.debug("Deposit #%d built: nonce=%d value=%d", index, nonce, tx.value)
        return tx

    async def _submit_one(self, index: int, record: DepositRecord) -> SubmissionResult:
        tx = await self.build_transaction(index, record)

        if not self.confirmer.confirm(tx):
            raise SubmissionAborted(index, "confirm", "Transaction cancelled")
        log.debug("Deposit #%d confirmed", index)

        try:
            signed = self.chain.sign_transaction(tx)
        except Exception as exc:
            raise SubmissionAborted(index, "sign", f"Failed to sign transaction: {exc}") from exc
        log.debug("Deposit #%d signed: %s", index, signed.tx_hash)

        try:
            tx_hash = await self.chain.send_raw_transaction(signed)
        except Exception as exc:
            raise SubmissionAborted(index, "broadcast", f"Failed to send transaction: {exc}") from exc
        log.info("Transaction sent: %s, waiting for the receipt...", tx_hash)

        try:
            receipt = await self.chain.wait_for_receipt(
                tx_hash, self._cfg.receipt_timeout, self._cfg.receipt_poll_interval,
            )
        except Exception as exc:
            raise SubmissionAborted(
                index, "receipt", f"Failed to get transaction receipt: {exc}"
            ) from exc

        if receipt is None:
            log.warning("Deposit #%d still pending: %s", index, tx_hash)
            return SubmissionResult(index=index, status="pending", tx_hash=tx_hash)

        status = "mined" if receipt.get("status") == 1 else "reverted"
        log.info(
            "Deposit #%d %s in block %s (tx=%s)",
            index, status, receipt.get("blockNumber"), tx_hash,
        )
        return SubmissionResult(index=index, status=status, tx_hash=tx_hash, receipt=receipt)
