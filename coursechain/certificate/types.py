"""Data types of the certificate contract."""

from dataclasses import dataclass
from enum import Enum

from coursechain.ledger import Address


class CertificateStatus(Enum):
    """Whether a certificate still stands or has been withdrawn."""

    ACTIVE = "active"
    REVOKED = "revoked"


class Permission(Enum):
    """A permission, valued by the name of the role flag that grants it."""

    ISSUE = "can_issue"
    REVOKE = "can_revoke"


@dataclass
class CertificateMetadata:
    """Everything recorded about one minted certificate."""

    course_id: str
    student_id: Address
    instructor_id: Address
    issue_date: int
    metadata_uri: str
    token_id: bytes
    title: str
    description: str
    status: CertificateStatus
    expiry_date: int


@dataclass(frozen=True)
class Role:
    """The set of permissions held by one user."""

    can_issue: bool = False
    can_revoke: bool = False

    def has(self, permission: Permission) -> bool:
        """Return True if this role grants the permission."""
        return bool(getattr(self, permission.value))