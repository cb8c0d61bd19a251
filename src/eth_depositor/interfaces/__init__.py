"""Protocol interfaces for eth_depositor components."""

from eth_depositor.interfaces.chain import ChainClient
from eth_depositor.interfaces.confirmer import Confirmer

__all__ = ["ChainClient", "Confirmer"]
