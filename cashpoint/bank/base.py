"""Bank capability consumed by the machine."""

from abc import ABC, abstractmethod

from cashpoint.models import AuthorizationToken, Money


class Bank(ABC):
    """Card authorization and account charging.

    Implementations raise ``AuthorizationError`` from :meth:`authorize`
    and ``AccountError`` from :meth:`charge`.
    """

    @abstractmethod
    def authorize(self, pin: str, card_number: str) -> AuthorizationToken:
        """Validate a PIN and card number pair and return a token."""

    @abstractmethod
    def charge(self, token: AuthorizationToken, money: Money) -> None:
        """Debit the account bound to ``token`` by ``money``."""
