"""Domain models for the cash machine."""

from cashpoint.models.banknotes import BanknotesPack, Withdrawal
from cashpoint.models.catalog import denominations, smallest_denomination, supported_currencies
from cashpoint.models.enums import Banknote, ErrorCode
from cashpoint.models.money import AuthorizationToken, Card, Money, PinCode

__all__ = [
    "AuthorizationToken",
    "Banknote",
    "BanknotesPack",
    "Card",
    "ErrorCode",
    "Money",
    "PinCode",
    "Withdrawal",
    "denominations",
    "smallest_denomination",
    "supported_currencies",
]
