"""Confirmer protocol - operator approval of a built transaction."""

from __future__ import annotations

from typing import Protocol

from eth_depositor.models.records import PendingTransaction


class Confirmer(Protocol):
    """Shows a transaction to the operator and returns their decision."""

    def confirm(self, tx: PendingTransaction) -> bool:
        """Return True only if the operator approved the transaction."""
        ...
