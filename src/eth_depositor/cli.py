"""CLI entry point for eth-depositor."""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from eth_account import Account
from web3 import Web3

from eth_depositor.config import load_config, validate_config
from eth_depositor.deposit.data import decode_record, load_deposit_file
from eth_depositor.errors import ConfigError, DepositorError, SubmissionAborted
from eth_depositor.ethereum.client import Web3ChainClient
from eth_depositor.ethereum.contract import load_contract_abi
from eth_depositor.models.config import DEPOSIT_CONTRACT_ADDRESS, GAS_LIMIT, WEI_PER_GWEI
from eth_depositor.models.records import SubmissionResult
from eth_depositor.prompt import AutoConfirmer, ClickConfirmer
from eth_depositor.submitter import DepositSubmitter


def _eth(gwei: int) -> str:
    return f"{gwei / WEI_PER_GWEI:.9f} ETH"


def _fail(message: str) -> None:
    """Print a diagnostic and exit non-zero."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load(ctx: click.Context):
    try:
        cfg = load_config(ctx.obj["config_path"])
    except ConfigError as exc:
        _fail(str(exc))
    if not ctx.obj["verbose"] and cfg.log_level.lower() == "debug":
        logging.getLogger().setLevel(logging.DEBUG)
    return cfg


def _report(result: SubmissionResult) -> None:
    if result.receipt is None:
        click.echo(f"Transaction {result.tx_hash} is still pending, check it later.\n")
        return
    click.echo(f"Transaction {result.tx_hash} {result.status}")
    click.echo(f"Transaction receipt: {Web3.to_json(result.receipt)}\n")
    if not result.succeeded:
        click.echo(f"Transaction {result.tx_hash} reverted!", err=True)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """eth-depositor - submit validator deposits to the deposit contract."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Submission ─────────────────────────────────────────


@cli.command()
@click.argument("deposit_file", type=click.Path(dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.pass_context
def submit(ctx: click.Context, deposit_file: str, yes: bool) -> None:
    """Submit every deposit in DEPOSIT_FILE, one transaction each.

    Each transaction is shown before signing and only sent after answering
    "y". Any failure stops the batch; deposits already mined stay mined.
    """
    cfg = _load(ctx)

    try:
        validate_config(cfg)
        abi = load_contract_abi(cfg.abi_path)
        records = load_deposit_file(deposit_file)
        chain = Web3ChainClient(cfg.rpc_url, cfg.private_key, abi)
    except DepositorError as exc:
        _fail(str(exc))

    click.echo(f"Deposit data has {len(records)} entries")
    click.echo(f"  Sender:    {chain.address}")
    click.echo(f"  Contract:  {DEPOSIT_CONTRACT_ADDRESS}")

    confirmer = AutoConfirmer() if yes else ClickConfirmer()
    submitter = DepositSubmitter(cfg, chain, confirmer, on_result=_report)

    async def _submit():
        try:
            return await submitter.submit(records)
        finally:
            await chain.close()

    try:
        results = asyncio.run(_submit())
    except SubmissionAborted as exc:
        if exc.completed:
            click.echo(f"{len(exc.completed)} of {len(records)} deposits were sent before the failure.", err=True)
        _fail(str(exc))

    mined = sum(1 for r in results if r.succeeded)
    click.echo(f"Done: {mined}/{len(results)} deposits mined.")
    if mined != len(results):
        for r in results:
            if not r.succeeded:
                click.echo(f"  #{r.index} {r.status}: {r.tx_hash}", err=True)
        sys.exit(1)


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.argument("deposit_file", type=click.Path(dir_okay=False))
@click.pass_context
def check(ctx: click.Context, deposit_file: str) -> None:
    """Validate DEPOSIT_FILE offline without contacting the chain."""
    _load(ctx)
    try:
        records = load_deposit_file(deposit_file)
        total = 0
        for i, record in enumerate(records):
            data = decode_record(record)
            total += data.amount_gwei
            click.echo(f"  #{i} pubkey=0x{data.pubkey.hex()[:16]}... amount={_eth(data.amount_gwei)}")
    except DepositorError as exc:
        _fail(str(exc))

    click.echo(f"{len(records)} deposits OK, total {_eth(total)}")


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show effective configuration."""
    cfg = _load(ctx)
    click.echo(f"RPC URL:    {cfg.rpc_url or '(not set)'}")
    click.echo(f"ABI file:   {cfg.abi_path}")
    click.echo(f"Contract:   {DEPOSIT_CONTRACT_ADDRESS}")
    click.echo(f"Gas limit:  {GAS_LIMIT}")
    click.echo(f"Timeout:    {cfg.receipt_timeout:.0f}s")
    click.echo(f"Key:        {'***configured***' if cfg.private_key else '(not set)'}")
    if cfg.private_key:
        try:
            click.echo(f"Sender:     {Account.from_key(cfg.private_key).address}")
        except Exception:
            click.echo("Sender:     (invalid private key)")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
