"""Configuration loading: TOML file + .env file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from dotenv import load_dotenv

from eth_depositor.errors import ConfigError
from eth_depositor.models.config import DepositorConfig


def load_config(
    config_path: str | Path | None = None,
    env_file: str | Path | None = ".env",
) -> DepositorConfig:
    """Load depositor configuration from TOML file, .env and env vars.

    Priority (highest wins):
        1. Environment variables (RPC_URL, PRIVATE_KEY, ...)
        2. .env file (never overrides variables already set)
        3. TOML config file
        4. Defaults from DepositorConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        try:
            with open(p, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse config file {p}: {exc}") from exc

    cfg = DepositorConfig()

    # ── Chain section ──────────────────────────────────────
    chain = raw.get("chain", {})
    if v := chain.get("rpc_url"):
        cfg.rpc_url = str(v)
    if v := chain.get("private_key"):
        cfg.private_key = str(v)
    if v := chain.get("abi_path"):
        cfg.abi_path = str(v)

    # ── Submit section ─────────────────────────────────────
    submit = raw.get("submit", {})
    if (v := submit.get("receipt_timeout")) is not None:
        cfg.receipt_timeout = float(v)
    if (v := submit.get("receipt_poll_interval")) is not None:
        cfg.receipt_poll_interval = float(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("log_level"):
        cfg.log_level = str(v)

    # ── Environment overrides (highest priority) ───────────
    if env_file is not None:
        load_dotenv(env_file, override=False)

    if rpc := os.environ.get("RPC_URL"):
        cfg.rpc_url = rpc
    if key := os.environ.get("PRIVATE_KEY"):
        cfg.private_key = key
    if abi := os.environ.get("DEPOSIT_ABI_PATH"):
        cfg.abi_path = abi
    if timeout := os.environ.get("RECEIPT_TIMEOUT"):
        try:
            cfg.receipt_timeout = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"RECEIPT_TIMEOUT must be a number, got {timeout!r}") from exc

    cfg.abi_path = str(Path(cfg.abi_path).expanduser())

    return cfg


def validate_config(cfg: DepositorConfig) -> None:
    """Raise ConfigError unless everything needed to submit is present."""
    if not cfg.private_key:
        raise ConfigError("PRIVATE_KEY not set in environment, .env or config file")
    if not cfg.rpc_url:
        raise ConfigError("RPC_URL not set in environment, .env or config file")
    if not Path(cfg.abi_path).is_file():
        raise ConfigError(f"Contract ABI file not found: {cfg.abi_path}")
    if cfg.receipt_timeout <= 0:
        raise ConfigError("receipt_timeout must be positive")
    if cfg.receipt_poll_interval <= 0:
        raise ConfigError("receipt_poll_interval must be positive")
