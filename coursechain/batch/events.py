"""Events published by the batch certificate contract."""

from __future__ import annotations

from coursechain.batch.certificate import CertificateData
from coursechain.ledger import Address, Event, Ledger

CERTIFICATE_MINTED = "CERTIFICATE_MINTED"
CERTIFICATE_REVOKED = "CERTIFICATE_REVOKED"
BATCH_MINT_COMPLETED = "BATCH_MINT_COMPLETED"
ISSUER_ADDED = "ISSUER_ADDED"
ISSUER_REMOVED = "ISSUER_REMOVED"
CONTRACT_INITIALIZED = "CONTRACT_INITIALIZED"


def emit_certificate_minted(
    ledger: Ledger, issuer: Address, owner: Address, certificate: CertificateData
) -> Event:
    topics = (CERTIFICATE_MINTED, issuer, owner, certificate.id)
    data = (
        certificate.id,
        certificate.metadata_hash,
        certificate.valid_from,
        certificate.valid_until,
        certificate.revocable,
        int(certificate.cert_type),
    )
    return ledger.publish(topics, data)


def emit_certificate_revoked(
    ledger: Ledger, revoker: Address, certificate_id: int
) -> Event:
    return ledger.publish((CERTIFICATE_REVOKED, revoker, certificate_id), ())


def emit_batch_mint_completed(
    ledger: Ledger,
    issuer: Address,
    total_count: int,
    success_count: int,
    failure_count: int,
) -> Event:
    return ledger.publish(
        (BATCH_MINT_COMPLETED, issuer), (total_count, success_count, failure_count)
    )


def emit_issuer_added(ledger: Ledger, admin: Address, issuer: Address) -> Event:
    return ledger.publish((ISSUER_ADDED, admin), issuer)


def emit_issuer_removed(ledger: Ledger, admin: Address, issuer: Address) -> Event:
    return ledger.publish((ISSUER_REMOVED, admin), issuer)


def emit_contract_initialized(
    ledger: Ledger, admin: Address, max_batch_size: int
) -> Event:
    return ledger.publish((CONTRACT_INITIALIZED, admin), max_batch_size)