"""Money and credential value objects."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Money:
    """An amount in a given currency.

    ``amount`` accepts ints, strings and floats; floats go through ``str``
    so that ``0.5`` becomes ``Decimal("0.5")`` rather than its binary
    expansion.
    """

    amount: Decimal
    currency: str = "PLN"

    def __post_init__(self) -> None:
        try:
            amount = Decimal(str(self.amount))
        except InvalidOperation:
            raise ValueError(f"Invalid money amount: {self.amount!r}") from None
        if not amount.is_finite():
            raise ValueError(f"Invalid money amount: {self.amount!r}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", self.currency.upper())

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Card:
    """Payment card, identified by its number only."""

    number: str

    def __post_init__(self) -> None:
        if not self.number or not self.number.isdigit():
            raise ValueError("Card number must be a non-empty string of digits")

    @classmethod
    def create(cls, number: str) -> "Card":
        return cls(number)


@dataclass(frozen=True)
class PinCode:
    """Four digit PIN, handed to the bank untouched."""

    digits: tuple[int, ...]

    LENGTH = 4

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        if len(digits) != self.LENGTH:
            raise ValueError(f"PIN must have exactly {self.LENGTH} digits")
        if any(not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9 for d in digits):
            raise ValueError("PIN digits must be integers between 0 and 9")
        object.__setattr__(self, "digits", digits)

    @classmethod
    def create(cls, *digits: int) -> "PinCode":
        return cls(digits)

    @property
    def code(self) -> str:
        """PIN as a string, e.g. ``"1234"``."""
        return "".join(str(d) for d in self.digits)

    def __repr__(self) -> str:
        return "PinCode(****)"


@dataclass(frozen=True)
class AuthorizationToken:
    """Opaque token issued by the bank after a successful authorization."""

    value: str

    @classmethod
    def create(cls, value: str) -> "AuthorizationToken":
        return cls(value)
