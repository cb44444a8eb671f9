"""Enumeration types for the cash machine domain."""

from enum import Enum


class Banknote(Enum):
    """Banknotes the machine can hold, as (currency, face value)."""

    PL_10 = ("PLN", 10)
    PL_20 = ("PLN", 20)
    PL_50 = ("PLN", 50)
    PL_100 = ("PLN", 100)
    PL_200 = ("PLN", 200)
    PL_500 = ("PLN", 500)

    EUR_5 = ("EUR", 5)
    EUR_10 = ("EUR", 10)
    EUR_20 = ("EUR", 20)
    EUR_50 = ("EUR", 50)
    EUR_100 = ("EUR", 100)
    EUR_200 = ("EUR", 200)
    EUR_500 = ("EUR", 500)

    USD_1 = ("USD", 1)
    USD_2 = ("USD", 2)
    USD_5 = ("USD", 5)
    USD_10 = ("USD", 10)
    USD_20 = ("USD", 20)
    USD_50 = ("USD", 50)
    USD_100 = ("USD", 100)

    def __init__(self, currency: str, face_value: int) -> None:
        self.currency = currency
        self.face_value = face_value


class ErrorCode(str, Enum):
    WRONG_CURRENCY = "WRONG_CURRENCY"
    WRONG_AMOUNT = "WRONG_AMOUNT"
    AUTHORIZATION = "AUTHORIZATION"
    NO_FUNDS_ON_ACCOUNT = "NO_FUNDS_ON_ACCOUNT"
