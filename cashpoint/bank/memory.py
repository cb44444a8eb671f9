"""In-memory bank with card accounts."""

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal

from cashpoint.bank.base import Bank
from cashpoint.exceptions import AccountError, AuthorizationError
from cashpoint.models import AuthorizationToken, Card, Money, PinCode

logger = logging.getLogger(__name__)


@dataclass
class CardAccount:
    """Account reachable through one card."""

    card_number: str
    pin: str
    balance: Decimal
    currency: str = "PLN"


@dataclass
class InMemoryBank(Bank):
    """Bank keeping accounts in a dict keyed by card number.

    Tokens are single use: a token is forgotten once it is presented to
    :meth:`charge`, whether or not the charge succeeds.
    """

    accounts: dict[str, CardAccount] = field(default_factory=dict)
    _tokens: dict[str, str] = field(default_factory=dict, repr=False)

    def open_account(
        self,
        card: Card,
        pin: PinCode,
        balance: Decimal | int | str,
        currency: str = "PLN",
    ) -> CardAccount:
        """Register an account for a card."""
        account = CardAccount(
            card_number=card.number,
            pin=pin.code,
            balance=Decimal(str(balance)),
            currency=currency.upper(),
        )
        self.accounts[card.number] = account
        return account

    def balance_of(self, card: Card) -> Decimal:
        if card.number not in self.accounts:
            raise AccountError(f"No account for card {card.number}")
        return self.accounts[card.number].balance

    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        account = self.accounts.get(card_number)
        if account is None or account.pin != pin:
            logger.debug("Authorization rejected for card %s", card_number)
            raise AuthorizationError(f"Invalid credentials for card {card_number}")

        token = AuthorizationToken(uuid.uuid4().hex)
        self._tokens[token.value] = card_number
        logger.debug("Authorized card %s", card_number)
        return token

    def charge(self, token: AuthorizationToken, money: Money) -> None:
        card_number = self._tokens.pop(token.value, None)
        if card_number is None:
            raise AccountError("Unknown or already used authorization token")

        account = self.accounts[card_number]
        if money.currency != account.currency:
            raise AccountError(
                f"Account {card_number} is held in {account.currency}, not {money.currency}"
            )
        if money.amount > account.balance:
            raise AccountError(f"Insufficient funds on account {card_number}")

        account.balance -= money.amount
        logger.debug("Charged %s to card %s", money, card_number)
