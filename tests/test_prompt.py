"""Operator confirmation."""

from __future__ import annotations

import click
import pytest

from eth_depositor.models.records import PendingTransaction
from eth_depositor.prompt import AutoConfirmer, ClickConfirmer


def _tx() -> PendingTransaction:
    return PendingTransaction(
        chain_id=1337,
        sender="0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
        nonce=4,
        max_priority_fee_per_gas=1,
        max_fee_per_gas=2,
        gas=300_000,
        to="0x4242424242424242424242424242424242424242",
        value=32 * 10**18,
        data="0x22895118",
    )


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("Y", False), ("yes", False), ("n", False), ("", False), (" y", False)],
)
def test_only_literal_y_confirms(monkeypatch, capsys, answer, expected):
    prompts = []

    def fake_prompt(text, **kwargs):
        prompts.append(text)
        return answer

    monkeypatch.setattr(click, "prompt", fake_prompt)

    assert ClickConfirmer().confirm(_tx()) is expected
    assert prompts == ["Confirm transaction? (y/n)"]

    out = capsys.readouterr().out
    assert '"nonce": 4' in out
    assert "0x4242424242424242424242424242424242424242" in out


def test_eof_refuses(monkeypatch):
    def fake_prompt(text, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(click, "prompt", fake_prompt)

    assert ClickConfirmer().confirm(_tx()) is False


def test_auto_confirmer_always_confirms(capsys):
    assert AutoConfirmer().confirm(_tx()) is True
    assert "Transaction:" in capsys.readouterr().out
