"""Pytest configuration and fixtures."""

from dataclasses import dataclass, field

import pytest

from cashpoint.bank import Bank
from cashpoint.exceptions import AccountError, AuthorizationError
from cashpoint.machine import ATMachine
from cashpoint.models import AuthorizationToken, Card, Money, PinCode


@dataclass
class StubBank(Bank):
    """Hand-written bank double that records every call in order."""

    token: AuthorizationToken = field(default_factory=lambda: AuthorizationToken.create("token :)"))
    reject_authorization: bool = False
    reject_charge: bool = False
    authorize_error: Exception | None = None
    charge_error: Exception | None = None
    calls: list[tuple] = field(default_factory=list)

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        self.calls.append(("authorize", pin, card_number))
        if self.authorize_error is not None:
            raise self.authorize_error
        if self.reject_authorization:
            raise AuthorizationError("invalid PIN")
        return self.token

    def charge(self, token: AuthorizationToken, money: Money) -> None:
        self.calls.append(("charge", token, money))
        if self.charge_error is not None:
            raise self.charge_error
        if self.reject_charge:
            raise AccountError("insufficient funds")

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def bank() -> StubBank:
    return StubBank()


@pytest.fixture
def pin() -> PinCode:
    return PinCode.create(1, 2, 3, 4)


@pytest.fixture
def card() -> Card:
    return Card.create("123456789")


@pytest.fixture
def atm(bank: StubBank) -> ATMachine:
    """PLN machine with an empty deposit."""
    return ATMachine(bank, "PLN")
