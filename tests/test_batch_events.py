import pytest

from coursechain.batch import events
from coursechain.batch.certificate import CertificateData, CertificateType
from coursechain.ledger import Ledger


@pytest.fixture
def ledger():
    return Ledger()


def _cert():
    return CertificateData(
        id=7,
        metadata_hash=bytes([1] * 32),
        valid_from=0,
        valid_until=86400,
        revocable=True,
        cert_type=CertificateType.GOLD,
    )


def test_certificate_minted(ledger):
    issuer, owner = ledger.generate_address(), ledger.generate_address()
    cert = _cert()
    event = events.emit_certificate_minted(ledger, issuer, owner, cert)
    assert event.topics == ("CERTIFICATE_MINTED", issuer, owner, cert.id)
    assert event.data == (
        cert.id,
        cert.metadata_hash,
        cert.valid_from,
        cert.valid_until,
        cert.revocable,
        int(CertificateType.GOLD),
    )
    assert ledger.events == [event]


def test_certificate_revoked(ledger):
    revoker = ledger.generate_address()
    event = events.emit_certificate_revoked(ledger, revoker, 7)
    assert event.topics == ("CERTIFICATE_REVOKED", revoker, 7)
    assert event.data == ()


def test_batch_mint_completed(ledger):
    issuer = ledger.generate_address()
    event = events.emit_batch_mint_completed(ledger, issuer, 3, 2, 1)
    assert event.topics == ("BATCH_MINT_COMPLETED", issuer)
    assert event.data == (3, 2, 1)


def test_issuer_added_and_removed(ledger):
    admin, issuer = ledger.generate_address(), ledger.generate_address()
    added = events.emit_issuer_added(ledger, admin, issuer)
    removed = events.emit_issuer_removed(ledger, admin, issuer)
    assert added.topics == ("ISSUER_ADDED", admin)
    assert removed.topics == ("ISSUER_REMOVED", admin)
    assert added.data == issuer
    assert removed.data == issuer
    assert ledger.events == [added, removed]


def test_contract_initialized(ledger):
    admin = ledger.generate_address()
    event = events.emit_contract_initialized(ledger, admin, 10)
    assert event.topics == ("CONTRACT_INITIALIZED", admin)
    assert event.data == 10