"""A minimal fungible token: admin minting, balances and transfers."""

from __future__ import annotations

from enum import IntEnum

from coursechain.ledger import Address, ContractError, Ledger

_I128_MAX = 2**127 - 1


class TokenErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    NOT_INITIALIZED = 2
    INVALID_AMOUNT = 3
    INSUFFICIENT_BALANCE = 4


class TokenError(ContractError):
    """A token contract failure identified by its error code."""

    code: TokenErrorCode

    def __init__(self, code: TokenErrorCode | int) -> None:
        super().__init__(TokenErrorCode(code))


def _checked(value: int) -> int:
    if value > _I128_MAX:
        raise OverflowError("balance exceeds the 128-bit signed range")
    return value


class TokenContract:
    """Balances per address; only the admin may mint."""

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger
        self._admin: Address | None = None
        self._balances: dict[Address, int] = {}

    def initialize(self, admin: Address) -> None:
        """Set the admin; raises ALREADY_INITIALIZED on a second call."""
        if self._admin is not None:
            raise TokenError(TokenErrorCode.ALREADY_INITIALIZED)
        self.ledger.require_auth(admin)
        self._admin = admin

    def mint(self, to: Address, amount: int) -> None:
        """Create ``amount`` new tokens for ``to``; requires the admin's auth."""
        if self._admin is None:
            raise TokenError(TokenErrorCode.NOT_INITIALIZED)
        self.ledger.require_auth(self._admin)
        if amount <= 0:
            raise TokenError(TokenErrorCode.INVALID_AMOUNT)
        self._balances[to] = _checked(self.balance(to) + amount)

    def balance(self, account: Address) -> int:
        return self._balances.get(account, 0)

    def transfer(self, sender: Address, recipient: Address, amount: int) -> None:
        """Move ``amount`` tokens; requires the sender's authorization."""
        self.ledger.require_auth(sender)
        if amount <= 0:
            raise TokenError(TokenErrorCode.INVALID_AMOUNT)
        sender_balance = self.balance(sender)
        if sender_balance < amount:
            raise TokenError(TokenErrorCode.INSUFFICIENT_BALANCE)
        new_recipient = _checked(
            (sender_balance - amount if recipient == sender else self.balance(recipient))
            + amount
        )
        self._balances[sender] = sender_balance - amount
        self._balances[recipient] = new_recipient