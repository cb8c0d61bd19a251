"""Deposit-data file loading and hex field decoding."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from eth_utils import decode_hex, encode_hex

from eth_depositor.errors import DepositDataError
from eth_depositor.models.records import DepositData, DepositRecord

log = logging.getLogger(__name__)

PUBKEY_LENGTH = 48
WITHDRAWAL_CREDENTIALS_LENGTH = 32
SIGNATURE_LENGTH = 96
DEPOSIT_DATA_ROOT_LENGTH = 32

_REQUIRED_KEYS = (
    "amount",
    "pubkey",
    "withdrawal_credentials",
    "signature",
    "deposit_data_root",
)


def load_deposit_file(path: str | Path) -> list[DepositRecord]:
    """Read a JSON array of deposit records.

    Keys other than the five DepositRecord fields are ignored, so files
    produced by deposit tooling can be passed in as-is.
    """
    p = Path(path).expanduser()
    try:
        text = p.read_text()
    except OSError as exc:
        raise DepositDataError(f"Failed to read deposit data file {p}: {exc}") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DepositDataError(f"Failed to parse deposit data file {p}: {exc}") from exc

    if not isinstance(raw, list):
        raise DepositDataError(
            f"Deposit data file {p} must contain a JSON array, got {type(raw).__name__}"
        )

    records = [parse_record(entry, i) for i, entry in enumerate(raw)]
    log.debug("Loaded %d deposit records from %s", len(records), p)
    return records


def parse_record(entry: object, index: int = 0) -> DepositRecord:
    """Build a DepositRecord from one decoded JSON object."""
    if not isinstance(entry, dict):
        raise DepositDataError(f"Deposit #{index} is not a JSON object")

    missing = [k for k in _REQUIRED_KEYS if k not in entry]
    if missing:
        raise DepositDataError(f"Deposit #{index} is missing {', '.join(missing)}")

    amount = entry["amount"]
    # bool is an int subclass; true/false in the JSON is never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise DepositDataError(
            f"Deposit #{index} amount must be a non-negative integer (gwei), got {amount!r}"
        )

    return DepositRecord(
        amount=amount,
        pubkey=entry["pubkey"],
        withdrawal_credentials=entry["withdrawal_credentials"],
        signature=entry["signature"],
        deposit_data_root=entry["deposit_data_root"],
    )


def decode_field(name: str, value: object, expected_length: int) -> bytes:
    """Decode a hex string (0x prefix optional) and check its byte length."""
    if not isinstance(value, str):
        raise DepositDataError(f"Failed to decode {name}: expected hex string, got {value!r}")
    try:
        decoded = decode_hex(value)
    except ValueError as exc:
        raise DepositDataError(f"Failed to decode {name}: {exc}") from exc

    if len(decoded) != expected_length:
        raise DepositDataError(
            f"Invalid length for {name}: expected {expected_length} bytes, got {len(decoded)}"
        )
    return decoded


def decode_record(record: DepositRecord) -> DepositData:
    """Decode the hex fields of a record into raw bytes."""
    return DepositData(
        amount_gwei=record.amount,
        pubkey=decode_field("pubkey", record.pubkey, PUBKEY_LENGTH),
        withdrawal_credentials=decode_field(
            "withdrawal_credentials",
            record.withdrawal_credentials,
            WITHDRAWAL_CREDENTIALS_LENGTH,
        ),
        signature=decode_field("signature", record.signature, SIGNATURE_LENGTH),
        deposit_data_root=decode_field(
            "deposit data root", record.deposit_data_root, DEPOSIT_DATA_ROOT_LENGTH
        ),
    )


def encode_record(data: DepositData) -> DepositRecord:
    """Inverse of decode_record, producing 0x-less hex like deposit tooling does."""
    return DepositRecord(
        amount=data.amount_gwei,
        pubkey=encode_hex(data.pubkey)[2:],
        withdrawal_credentials=encode_hex(data.withdrawal_credentials)[2:],
        signature=encode_hex(data.signature)[2:],
        deposit_data_root=encode_hex(data.deposit_data_root)[2:],
    )
