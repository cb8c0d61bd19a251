"""Deposit contract ABI loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from eth_depositor.errors import ConfigError

log = logging.getLogger(__name__)

DEPOSIT_FUNCTION = "deposit"
DEPOSIT_INPUT_TYPES = ["bytes", "bytes", "bytes", "bytes32"]


def load_contract_abi(path: str | Path) -> list[dict[str, Any]]:
    """Load a contract ABI from JSON.

    Accepts either a bare ABI array or a build artifact with an "abi" key.
    The ABI must declare deposit(bytes,bytes,bytes,bytes32).
    """
    p = Path(path).expanduser()
    try:
        with open(p) as f:
            raw = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Failed to read ABI file {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse contract ABI {p}: {exc}") from exc

    abi = raw.get("abi") if isinstance(raw, dict) else raw
    if not isinstance(abi, list):
        raise ConfigError(f"Contract ABI {p} must be a JSON array")

    for item in abi:
        if not isinstance(item, dict):
            raise ConfigError(f"Contract ABI {p} entries must be JSON objects, got {item!r}")
        if item.get("type") != "function" or item.get("name") != DEPOSIT_FUNCTION:
            continue
        types = [i.get("type") for i in item.get("inputs", [])]
        if types == DEPOSIT_INPUT_TYPES:
            log.debug("Loaded contract ABI from %s (%d entries)", p, len(abi))
            return abi

    raise ConfigError(
        f"Contract ABI {p} has no {DEPOSIT_FUNCTION}({','.join(DEPOSIT_INPUT_TYPES)}) function"
    )
