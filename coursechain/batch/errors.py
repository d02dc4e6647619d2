"""Errors and per-item results of the batch certificate contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from coursechain.ledger import ContractError


class BatchErrorCode(IntEnum):
    # General errors
    UNAUTHORIZED = 1
    ALREADY_INITIALIZED = 2
    NOT_INITIALIZED = 3

    # Minting errors
    INVALID_INPUT = 100
    DUPLICATE_CERTIFICATE = 101
    STORAGE_ERROR = 102
    BATCH_SIZE_TOO_LARGE = 103
    INVALID_TIME_RANGE = 104
    BATCH_SIZE_EXCEEDED = 105

    # Certificate management errors
    CERTIFICATE_NOT_FOUND = 200
    CERTIFICATE_ALREADY_REVOKED = 201
    CERTIFICATE_NOT_REVOCABLE = 202


class BatchError(ContractError):
    """A batch certificate contract failure identified by its error code."""

    code: BatchErrorCode

    def __init__(self, code: BatchErrorCode | int) -> None:
        super().__init__(BatchErrorCode(code))


@dataclass(frozen=True)
class MintResult:
    """Outcome of minting one certificate of a batch."""

    certificate_id: int
    error: BatchErrorCode | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None