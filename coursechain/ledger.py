"""In-memory ledger environment: addresses, authorization, clock and events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable


@dataclass(frozen=True, order=True)
class Address:
    """An account or contract address on the ledger."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Event:
    """A published contract event."""

    topics: tuple
    data: Any


class AuthorizationError(Exception):
    """Raised when an address has not authorized the current call."""

    def __init__(self, address: Address) -> None:
        self.address = address
        super().__init__(f"address {address} has not authorized this call")


class ContractError(Exception):
    """Base class for contract errors that carry a numeric error code."""

    def __init__(self, code: IntEnum) -> None:
        self.code = code
        super().__init__(f"{code.name} ({int(code)})")


class Ledger:
    """Execution environment shared by contracts: clock, auth and event log."""

    def __init__(self, timestamp: int = 0) -> None:
        self.timestamp = timestamp
        self.events: list[Event] = []
        self._counter = itertools.count(1)
        self._all_authorized = False
        self._authorized: frozenset[Address] = frozenset()

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @timestamp.setter
    def timestamp(self, value: int) -> None:
        if value < 0:
            raise ValueError("timestamp must not be negative")
        self._timestamp = value

    def generate_address(self) -> Address:
        """Return a fresh address never handed out before by this ledger."""
        return Address(f"addr-{next(self._counter)}")

    def mock_all_auths(self) -> None:
        """Treat every address as having authorized every call."""
        self._all_authorized = True
        self._authorized = frozenset()

    def mock_auths(self, addresses: Iterable[Address]) -> None:
        """Authorize only the given addresses from now on."""
        self._all_authorized = False
        self._authorized = frozenset(addresses)

    def require_auth(self, address: Address) -> None:
        """Raise AuthorizationError unless the address has authorized the call."""
        if not (self._all_authorized or address in self._authorized):
            raise AuthorizationError(address)

    def publish(self, topics: Iterable[Any], data: Any) -> Event:
        """Record an event and return it."""
        event = Event(tuple(topics), data)
        self.events.append(event)
        return event