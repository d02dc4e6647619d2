"""Certificate contract: roles, minting, verification and revocation."""

from __future__ import annotations

from coursechain.certificate import events
from coursechain.certificate.errors import CertificateError, CertificateErrorCode
from coursechain.certificate.storage import CertificateStorage
from coursechain.certificate.types import (
    CertificateMetadata,
    CertificateStatus,
    Permission,
    Role,
)
from coursechain.ledger import Address, Ledger


class CertificateContract:
    """Issues and tracks course certificates on a ledger."""

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger
        self.storage = CertificateStorage()

    def _require_initialized(self) -> None:
        if not self.storage.initialized:
            raise CertificateError(CertificateErrorCode.NOT_INITIALIZED)

    def _require_admin(self) -> None:
        self._require_initialized()
        self.ledger.require_auth(self.storage.admin)

    def initialize(self, admin: Address) -> None:
        """Set the admin; raises ALREADY_INITIALIZED on a second call."""
        if self.storage.initialized:
            raise CertificateError(CertificateErrorCode.ALREADY_INITIALIZED)
        self.ledger.require_auth(admin)
        self.storage.admin = admin
        self.storage.initialized = True
        events.emit_contract_initialized(self.ledger, admin)

    def get_admin(self) -> Address:
        self._require_initialized()
        return self.storage.admin

    def grant_role(self, user: Address, role: Role) -> None:
        """Give a user a role; requires the admin's authorization."""
        self._require_admin()
        self.storage.set_role(user, role)
        events.emit_role_added(self.ledger, user, role)

    def update_role(self, user: Address, new_role: Role) -> None:
        """Replace an existing role; requires the admin's authorization."""
        self._require_admin()
        if self.storage.get_role(user) is None:
            raise CertificateError(CertificateErrorCode.ROLE_NOT_FOUND)
        self.storage.set_role(user, new_role)
        events.emit_role_updated(self.ledger, user, new_role)

    def revoke_role(self, user: Address) -> None:
        """Remove an existing role; requires the admin's authorization."""
        self._require_admin()
        if self.storage.get_role(user) is None:
            raise CertificateError(CertificateErrorCode.ROLE_NOT_FOUND)
        self.storage.remove_role(user)
        events.emit_role_removed(self.ledger, user)

    def get_role(self, user: Address) -> Role | None:
        return self.storage.get_role(user)

    def has_permission(self, user: Address, permission: Permission) -> bool:
        role = self.storage.get_role(user)
        return role is not None and role.has(permission)

    def mint_certificate(
        self,
        issuer: Address,
        certificate_id: bytes,
        course_id: str,
        student: Address,
        title: str,
        description: str,
        metadata_uri: str,
        expiry_date: int,
    ) -> None:
        """Create an active certificate for a student; expiry 0 means never."""
        self._require_initialized()
        if not self.has_permission(issuer, Permission.ISSUE):
            raise CertificateError(CertificateErrorCode.UNAUTHORIZED)
        if not (title and description and metadata_uri and course_id):
            raise CertificateError(CertificateErrorCode.INVALID_METADATA)
        if self.storage.has_certificate(certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_ALREADY_EXISTS)

        token_id = certificate_id
        metadata = CertificateMetadata(
            course_id=course_id,
            student_id=student,
            instructor_id=issuer,
            issue_date=self.ledger.timestamp,
            metadata_uri=metadata_uri,
            token_id=token_id,
            title=title,
            description=description,
            status=CertificateStatus.ACTIVE,
            expiry_date=expiry_date,
        )
        self.storage.set_certificate(certificate_id, metadata)
        self.storage.add_user_certificate(student, certificate_id)
        events.emit_certificate_minted(
            self.ledger, certificate_id, metadata, student, issuer, token_id
        )

    def is_certificate_expired(self, certificate_id: bytes) -> bool:
        """True if past its expiry date; unknown certificates count as expired."""
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            return True
        if metadata.expiry_date == 0:
            return False
        return metadata.expiry_date < self.ledger.timestamp

    def verify_certificate(self, certificate_id: bytes) -> CertificateMetadata:
        """Return the metadata of an existing, unrevoked, unexpired certificate."""
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        if metadata.status is CertificateStatus.REVOKED:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_REVOKED)
        if self.is_certificate_expired(certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_EXPIRED)
        return metadata

    def revoke_certificate(self, revoker: Address, certificate_id: bytes) -> None:
        """Mark a certificate revoked; the revoker needs the revoke permission."""
        self._require_initialized()
        if not self.has_permission(revoker, Permission.REVOKE):
            raise CertificateError(CertificateErrorCode.UNAUTHORIZED)
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        metadata.status = CertificateStatus.REVOKED
        self.storage.set_certificate(certificate_id, metadata)
        events.emit_certificate_revoked(
            self.ledger, certificate_id, metadata, revoker, self.ledger.timestamp
        )

    def track_certificates(self, user_address: Address) -> list[bytes]:
        return self.storage.user_certificates(user_address)

    def add_user_certificate(
        self, user_address: Address, certificate_id: bytes
    ) -> None:
        if not self.storage.has_certificate(certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        self.storage.add_user_certificate(user_address, certificate_id)

    def is_valid_certificate(
        self, certificate_id: bytes
    ) -> tuple[bool, CertificateMetadata]:
        """Return whether the certificate is active and unexpired, with its metadata."""
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        valid = (
            metadata.status is CertificateStatus.ACTIVE
            and not self.is_certificate_expired(certificate_id)
        )
        return valid, metadata