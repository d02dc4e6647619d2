"""State kept by the certificate contract."""

from __future__ import annotations

from dataclasses import replace

from coursechain.certificate.types import CertificateMetadata, Role
from coursechain.ledger import Address


class CertificateStorage:
    """Admin, roles, certificates and per-user certificate lists."""

    def __init__(self) -> None:
        self.admin: Address | None = None
        self.initialized = False
        self._roles: dict[Address, Role] = {}
        self._certificates: dict[bytes, CertificateMetadata] = {}
        self._user_certs: dict[Address, list[bytes]] = {}

    def get_role(self, user: Address) -> Role | None:
        return self._roles.get(user)

    def set_role(self, user: Address, role: Role) -> None:
        self._roles[user] = role

    def remove_role(self, user: Address) -> None:
        self._roles.pop(user, None)

    def get_certificate(self, certificate_id: bytes) -> CertificateMetadata | None:
        """Return a copy of the stored metadata, or None."""
        metadata = self._certificates.get(certificate_id)
        return None if metadata is None else replace(metadata)

    def set_certificate(
        self, certificate_id: bytes, metadata: CertificateMetadata
    ) -> None:
        self._certificates[certificate_id] = replace(metadata)

    def has_certificate(self, certificate_id: bytes) -> bool:
        return certificate_id in self._certificates

    def user_certificates(self, user: Address) -> list[bytes]:
        return list(self._user_certs.get(user, ()))

    def add_user_certificate(self, user: Address, certificate_id: bytes) -> None:
        """Append the certificate to the user's list unless already present."""
        certs = self._user_certs.setdefault(user, [])
        if certificate_id not in certs:
            certs.append(certificate_id)

    def remove_user_certificate(self, user: Address, certificate_id: bytes) -> None:
        certs = self._user_certs.get(user)
        if certs and certificate_id in certs:
            certs.remove(certificate_id)