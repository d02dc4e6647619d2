"""Events published by the certificate contract."""

from __future__ import annotations

from dataclasses import replace

from coursechain.certificate.types import CertificateMetadata, Role
from coursechain.ledger import Address, Event, Ledger


def emit_contract_initialized(ledger: Ledger, admin: Address) -> Event:
    return ledger.publish(("contract_initialized",), admin)


def emit_role_added(ledger: Ledger, user: Address, role: Role) -> Event:
    return ledger.publish(("role_added", user), (role.can_issue, role.can_revoke))


def emit_role_removed(ledger: Ledger, user: Address) -> Event:
    return ledger.publish(("role_removed", user), ())


def emit_role_updated(ledger: Ledger, user: Address, new_role: Role) -> Event:
    return ledger.publish(
        ("role_updated", user), (new_role.can_issue, new_role.can_revoke)
    )


def emit_certificate_minted(
    ledger: Ledger,
    certificate_id: bytes,
    metadata: CertificateMetadata,
    student: Address,
    issuer: Address,
    token_id: bytes,
) -> Event:
    return ledger.publish(
        ("nft_certificate_minted", certificate_id),
        (replace(metadata), student, issuer, token_id),
    )


def emit_certificate_revoked(
    ledger: Ledger,
    certificate_id: bytes,
    metadata: CertificateMetadata,
    revoker: Address,
    timestamp: int,
) -> Event:
    return ledger.publish(
        ("nft_certificate_revoked", certificate_id),
        (replace(metadata), revoker, timestamp),
    )


def emit_certificate_transferred(
    ledger: Ledger, certificate_id: bytes, sender: Address, recipient: Address
) -> Event:
    return ledger.publish(
        ("certificate_transferred", certificate_id), (sender, recipient)
    )