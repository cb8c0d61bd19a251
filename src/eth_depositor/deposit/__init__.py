"""Deposit-data file handling."""

from eth_depositor.deposit.data import (
    decode_record,
    encode_record,
    load_deposit_file,
    parse_record,
)

__all__ = ["decode_record", "encode_record", "load_deposit_file", "parse_record"]
