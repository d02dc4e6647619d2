"""Certificate data handled by the batch minting contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class CertificateType(IntEnum):
    STANDARD = 0
    PREMIUM = 1
    GOLD = 2

    @classmethod
    def from_value(cls, value: int) -> CertificateType | None:
        """Return the type with this numeric value, or None if there is none."""
        try:
            return cls(value)
        except ValueError:
            return None


class ConversionError(IntEnum):
    INVALID_VALUE = 1


@dataclass(frozen=True)
class CertificateData:
    id: int
    metadata_hash: bytes
    valid_from: int
    valid_until: int
    revocable: bool
    cert_type: CertificateType

    def validate(self, now: int) -> bool:
        """True if the validity window is non-empty and ends after ``now``."""
        if self.valid_from >= self.valid_until:
            return False
        return self.valid_until > now