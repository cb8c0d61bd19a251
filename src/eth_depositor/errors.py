"""Exceptions raised for fatal depositor conditions."""

from __future__ import annotations

from eth_depositor.models.records import SubmissionResult


class DepositorError(Exception):
    """Base class for every fatal depositor error."""


class ConfigError(DepositorError):
    """Missing or invalid configuration."""


class DepositDataError(DepositorError):
    """Deposit-data file could not be read, parsed or decoded."""


class SubmissionAborted(DepositorError):
    """A step of the submit loop failed; the rest of the batch is skipped."""

    def __init__(
        self,
        index: int,
        step: str,
        reason: str,
        completed: list[SubmissionResult] | None = None,
    ) -> None:
        super().__init__(f"Deposit #{index} aborted at {step}: {reason}")
        self.index = index
        self.step = step
        self.reason = reason
        self.completed = list(completed or [])
