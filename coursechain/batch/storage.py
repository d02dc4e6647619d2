"""State kept by the batch certificate contract."""

from __future__ import annotations

from dataclasses import replace

from coursechain.batch.certificate import CertificateData
from coursechain.batch.errors import BatchError, BatchErrorCode
from coursechain.ledger import Address

DEFAULT_MAX_BATCH_SIZE = 10


class BatchStorage:
    """Admin, configuration, issuers, certificates and their owners."""

    def __init__(self) -> None:
        self._initialized = False
        self._admin: Address | None = None
        self._max_batch_size: int | None = None
        self._issuers: list[Address] = []
        self._certificates: dict[int, CertificateData] = {}
        self._owners: dict[Address, list[int]] = {}

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise BatchError(BatchErrorCode.NOT_INITIALIZED)

    def initialize(self, admin: Address, max_batch_size: int) -> None:
        if self._initialized:
            raise BatchError(BatchErrorCode.ALREADY_INITIALIZED)
        self._admin = admin
        self._max_batch_size = max_batch_size
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def admin(self) -> Address:
        if self._admin is None:
            raise BatchError(BatchErrorCode.NOT_INITIALIZED)
        return self._admin

    def max_batch_size(self) -> int:
        self._require_initialized()
        if self._max_batch_size is None:
            return DEFAULT_MAX_BATCH_SIZE
        return self._max_batch_size

    def is_issuer(self, address: Address) -> bool:
        self._require_initialized()
        return address in self._issuers

    def add_issuer(self, address: Address) -> None:
        self._require_initialized()
        if address not in self._issuers:
            self._issuers.append(address)

    def remove_issuer(self, address: Address) -> None:
        self._require_initialized()
        if address in self._issuers:
            self._issuers.remove(address)

    def certificate_exists(self, certificate_id: int) -> bool:
        self._require_initialized()
        return certificate_id in self._certificates

    def save_certificate(self, owner: Address, certificate: CertificateData) -> None:
        """Store a new certificate and record it under its owner."""
        self._require_initialized()
        if self.certificate_exists(certificate.id):
            raise BatchError(BatchErrorCode.DUPLICATE_CERTIFICATE)
        self._certificates[certificate.id] = certificate
        self._owners.setdefault(owner, []).append(certificate.id)

    def get_certificate(self, certificate_id: int) -> CertificateData | None:
        self._require_initialized()
        return self._certificates.get(certificate_id)

    def owner_certificates(self, owner: Address) -> list[int]:
        self._require_initialized()
        return list(self._owners.get(owner, ()))

    def revoke_certificate(self, certificate_id: int, now: int) -> None:
        """End a revocable certificate's validity at ``now``."""
        self._require_initialized()
        cert = self._certificates.get(certificate_id)
        if cert is None:
            raise BatchError(BatchErrorCode.CERTIFICATE_NOT_FOUND)
        if not cert.revocable:
            raise BatchError(BatchErrorCode.CERTIFICATE_NOT_REVOCABLE)
        self._certificates[certificate_id] = replace(cert, valid_until=now)