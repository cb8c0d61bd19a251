"""eth_depositor - submit validator deposit transactions to the deposit contract."""

__version__ = "0.1.0"
