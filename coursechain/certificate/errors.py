"""Errors raised by the certificate contract."""

from __future__ import annotations

from enum import IntEnum

from coursechain.ledger import ContractError


class CertificateErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    CERTIFICATE_ALREADY_EXISTS = 2
    CERTIFICATE_NOT_FOUND = 3
    NOT_INITIALIZED = 4
    UNAUTHORIZED = 5
    NOT_INSTRUCTOR = 6
    INVALID_TOKEN_ID = 7
    INVALID_METADATA = 8
    CERTIFICATE_REVOKED = 9
    TRANSFER_NOT_ALLOWED = 10
    ROLE_NOT_FOUND = 11
    CERTIFICATE_EXPIRED = 12


class CertificateError(ContractError):
    """A certificate contract failure identified by its error code."""

    code: CertificateErrorCode

    def __init__(self, code: CertificateErrorCode | int) -> None:
        super().__init__(CertificateErrorCode(code))