"""Contract minting course certificates singly or in batches."""

from __future__ import annotations

from typing import Sequence

from coursechain.batch import auth, events
from coursechain.batch.certificate import CertificateData
from coursechain.batch.errors import BatchError, BatchErrorCode, MintResult
from coursechain.batch.storage import BatchStorage
from coursechain.ledger import Address, Ledger


class BatchCertificateContract:
    """Issuers mint certificates for owners; the admin manages issuers."""

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger
        self.storage = BatchStorage()

    def initialize(self, admin: Address, max_batch_size: int) -> None:
        if self.storage.is_initialized():
            raise BatchError(BatchErrorCode.ALREADY_INITIALIZED)
        self.storage.initialize(admin, max_batch_size)
        events.emit_contract_initialized(self.ledger, admin, max_batch_size)

    def _require_admin(self, admin: Address) -> None:
        self.ledger.require_auth(admin)
        if not auth.is_admin(self.storage, admin):
            raise BatchError(BatchErrorCode.UNAUTHORIZED)

    def _require_issuer(self, issuer: Address) -> None:
        self.ledger.require_auth(issuer)
        if not auth.is_issuer(self.storage, issuer):
            raise BatchError(BatchErrorCode.UNAUTHORIZED)

    def add_issuer(self, admin: Address, issuer: Address) -> None:
        self._require_admin(admin)
        self.storage.add_issuer(issuer)
        events.emit_issuer_added(self.ledger, admin, issuer)

    def remove_issuer(self, admin: Address, issuer: Address) -> None:
        self._require_admin(admin)
        self.storage.remove_issuer(issuer)
        events.emit_issuer_removed(self.ledger, admin, issuer)

    def mint_single_certificate(
        self, issuer: Address, owner: Address, certificate: CertificateData
    ) -> None:
        self._require_issuer(issuer)
        if not certificate.validate(self.ledger.timestamp):
            raise BatchError(BatchErrorCode.INVALID_TIME_RANGE)
        if self.storage.certificate_exists(certificate.id):
            raise BatchError(BatchErrorCode.DUPLICATE_CERTIFICATE)
        self.storage.save_certificate(owner, certificate)
        events.emit_certificate_minted(self.ledger, issuer, owner, certificate)

    def mint_batch_certificates(
        self,
        issuer: Address,
        owners: Sequence[Address],
        certificates: Sequence[CertificateData],
    ) -> list[MintResult]:
        """Mint each certificate for the owner at the same position.

        The batch as a whole fails for an unauthorized issuer, an oversized
        batch or mismatched lengths; otherwise each item succeeds or fails
        on its own and the outcomes are returned in order.
        """
        self._require_issuer(issuer)
        owners = list(owners)
        certificates = list(certificates)
        batch_size = len(certificates)
        if batch_size > self.storage.max_batch_size():
            raise BatchError(BatchErrorCode.BATCH_SIZE_TOO_LARGE)
        if batch_size != len(owners):
            raise BatchError(BatchErrorCode.INVALID_INPUT)

        results = []
        for owner, certificate in zip(owners, certificates):
            try:
                self.mint_single_certificate(issuer, owner, certificate)
            except BatchError as error:
                results.append(MintResult(certificate.id, error.code))
            else:
                results.append(MintResult(certificate.id))

        successes = sum(result.succeeded for result in results)
        events.emit_batch_mint_completed(
            self.ledger, issuer, batch_size, successes, batch_size - successes
        )
        return results

    def revoke_certificate(self, issuer: Address, certificate_id: int) -> None:
        self._require_issuer(issuer)
        self.storage.revoke_certificate(certificate_id, self.ledger.timestamp)
        events.emit_certificate_revoked(self.ledger, issuer, certificate_id)

    def get_certificate(self, certificate_id: int) -> CertificateData | None:
        return self.storage.get_certificate(certificate_id)

    def get_owner_certificates(self, owner: Address) -> list[int]:
        return self.storage.owner_certificates(owner)

    def is_issuer(self, address: Address) -> bool:
        return self.storage.is_issuer(address)