"""Operator confirmation for built transactions."""

from __future__ import annotations

import json
import logging

import click

from eth_depositor.models.records import PendingTransaction

log = logging.getLogger(__name__)


def _echo_transaction(tx: PendingTransaction) -> None:
    click.echo(f"Transaction: {json.dumps(tx.describe(), indent=2)}\n")


class ClickConfirmer:
    """Prints the transaction and reads the operator's answer from the terminal.

    Only a literal "y" approves; "Y", "yes", an empty line or EOF all refuse.
    """

    prompt_text = "Confirm transaction? (y/n)"

    def confirm(self, tx: PendingTransaction) -> bool:
        _echo_transaction(tx)
        try:
            answer = click.prompt(self.prompt_text, default="", show_default=False)
        except click.Abort:
            return False
        return answer == "y"


class AutoConfirmer:
    """Approves every transaction without asking (``--yes``)."""

    def confirm(self, tx: PendingTransaction) -> bool:
        _echo_transaction(tx)
        log.info("Auto-confirmed transaction nonce=%d", tx.nonce)
        return True
