"""Physical cash inventory of the machine."""

from dataclasses import dataclass, field
from typing import Iterable

from cashpoint.exceptions import DepositInvariantError, InvalidDepositError
from cashpoint.models import Banknote, BanknotesPack, denominations


@dataclass
class MoneyDeposit:
    """Banknotes available in the machine, one count per denomination.

    Every denomination of ``currency`` has an entry; missing ones are held
    at zero. Two deposits are equal when their currency and every count
    match.
    """

    currency: str
    _counts: dict[Banknote, int] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.currency = self.currency.upper()
        known = denominations(self.currency)
        for note, count in self._counts.items():
            if note not in known:
                raise InvalidDepositError(f"{note.name} does not belong to currency {self.currency}")
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidDepositError(f"Invalid count {count!r} for {note.name}")
        self._counts = {note: self._counts.get(note, 0) for note in reversed(known)}

    @classmethod
    def create(cls, currency: str, packs: Iterable[BanknotesPack]) -> "MoneyDeposit":
        """Build a deposit from packs.

        Parameters
        ----------
        currency : str
            Currency of every pack.
        packs : Iterable[BanknotesPack]
            At most one pack per denomination.

        Raises
        ------
        InvalidDepositError
            If a pack is in another currency or a denomination repeats.
        """
        counts: dict[Banknote, int] = {}
        for pack in packs:
            if pack.banknote.currency != currency.upper():
                raise InvalidDepositError(
                    f"Pack of {pack.banknote.name} does not match deposit currency {currency}"
                )
            if pack.banknote in counts:
                raise InvalidDepositError(f"Duplicate pack for {pack.banknote.name}")
            counts[pack.banknote] = pack.count
        return cls(currency=currency, _counts=counts)

    @classmethod
    def empty(cls, currency: str) -> "MoneyDeposit":
        return cls(currency=currency)

    @property
    def packs(self) -> list[BanknotesPack]:
        """One pack per denomination, lowest face value first."""
        return [BanknotesPack(note, count) for note, count in self._counts.items()]

    def count_of(self, banknote: Banknote) -> int:
        return self._counts.get(banknote, 0)

    def total_value(self) -> int:
        return sum(note.face_value * count for note, count in self._counts.items())

    def apply_withdrawal(self, breakdown: Iterable[BanknotesPack]) -> None:
        """Remove the notes of a breakdown from the deposit.

        All entries are checked before any count changes, so a rejected
        breakdown leaves the deposit as it was.

        Raises
        ------
        DepositInvariantError
            If an entry is in another currency or asks for more notes
            than are available.
        """
        requested: dict[Banknote, int] = {}
        for pack in breakdown:
            requested[pack.banknote] = requested.get(pack.banknote, 0) + pack.count

        for note, count in requested.items():
            if note not in self._counts:
                raise DepositInvariantError(f"{note.name} is not held in a {self.currency} deposit")
            if count > self._counts[note]:
                raise DepositInvariantError(
                    f"Cannot take {count} x {note.name}, only {self._counts[note]} available"
                )

        for note, count in requested.items():
            self._counts[note] -= count

    def copy(self) -> "MoneyDeposit":
        return MoneyDeposit(currency=self.currency, _counts=dict(self._counts))
