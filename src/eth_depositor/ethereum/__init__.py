"""Ethereum integration components."""

from eth_depositor.ethereum.client import Web3ChainClient
from eth_depositor.ethereum.contract import load_contract_abi

__all__ = ["Web3ChainClient", "load_contract_abi"]
