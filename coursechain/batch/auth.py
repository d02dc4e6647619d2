"""Admin and issuer checks for the batch certificate contract."""

from coursechain.batch.errors import BatchError, BatchErrorCode
from coursechain.batch.storage import BatchStorage
from coursechain.ledger import Address


def _checked(storage: BatchStorage) -> BatchStorage:
    """Return the storage, raising if it has not been initialized."""
    if not storage.is_initialized():
        raise BatchError(BatchErrorCode.NOT_INITIALIZED)
    return storage


def _as_admin(storage: BatchStorage, admin: Address) -> BatchStorage:
    """Return the storage, raising unless the address is its admin."""
    if not is_admin(storage, admin):
        raise BatchError(BatchErrorCode.UNAUTHORIZED)
    return storage


def is_admin(storage: BatchStorage, address: Address) -> bool:
    return _checked(storage).admin() == address


def is_issuer(storage: BatchStorage, address: Address) -> bool:
    return _checked(storage).is_issuer(address)


def add_issuer(storage: BatchStorage, admin: Address, issuer: Address) -> None:
    _as_admin(storage, admin).add_issuer(issuer)


def remove_issuer(storage: BatchStorage, admin: Address, issuer: Address) -> None:
    _as_admin(storage, admin).remove_issuer(issuer)