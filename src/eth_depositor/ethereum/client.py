"""web3-backed chain client for deposit transactions."""

from __future__ import annotations

import logging
from typing import Any

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import TimeExhausted

from eth_depositor.errors import ConfigError
from eth_depositor.ethereum.contract import DEPOSIT_FUNCTION
from eth_depositor.models.config import DEPOSIT_CONTRACT_ADDRESS
from eth_depositor.models.records import DepositData, PendingTransaction, SignedDeposit

log = logging.getLogger(__name__)


class Web3ChainClient:
    """Talks to an execution-layer node through AsyncWeb3.

    Signing happens locally with eth_account; the node only sees the raw
    signed transaction.
    """

    def __init__(
        self,
        rpc_url: str,
        private_key: str,
        abi: list[dict[str, Any]],
        contract_address: str = DEPOSIT_CONTRACT_ADDRESS,
    ) -> None:
        try:
            self._account = Account.from_key(private_key)
        except Exception as exc:  # eth_keys raises its own ValidationError
            raise ConfigError(f"Invalid private key: {exc}") from exc

        self._w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._contract = self._w3.eth.contract(
            address=Web3.to_checksum_address(contract_address), abi=abi,
        )

    @property
    def address(self) -> str:
        return self._account.address

    async def close(self) -> None:
        """Close the provider's HTTP session."""
        await self._w3.provider.disconnect()

    async def get_chain_id(self) -> int:
        return await self._w3.eth.chain_id

    async def get_pending_nonce(self, address: str) -> int:
        return await self._w3.eth.get_transaction_count(address, "pending")

    async def suggest_priority_fee(self) -> int:
        return await self._w3.eth.max_priority_fee

    async def suggest_max_fee(self) -> int:
        # eth_gasPrice already includes the tip on top of the base fee
        return await self._w3.eth.gas_price

    def encode_deposit_call(self, data: DepositData) -> str:
        return self._contract.encode_abi(
            DEPOSIT_FUNCTION,
            args=[
                data.pubkey,
                data.withdrawal_credentials,
                data.signature,
                data.deposit_data_root,
            ],
        )

    def sign_transaction(self, tx: PendingTransaction) -> SignedDeposit:
        signed = self._account.sign_transaction(tx.to_tx_dict())
        return SignedDeposit(
            raw_transaction=bytes(signed.raw_transaction),
            tx_hash=Web3.to_hex(signed.hash),
        )

    async def send_raw_transaction(self, signed: SignedDeposit) -> str:
        tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float, poll_interval: float
    ) -> dict[str, Any] | None:
        try:
            receipt = await self._w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=timeout, poll_latency=poll_interval,
            )
        except TimeExhausted:
            log.warning("No receipt for %s after %.0fs", tx_hash, timeout)
            return None
        return dict(receipt)
