"""Banknote packs and the withdrawal handed to the customer."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from cashpoint.models.enums import Banknote


@dataclass(frozen=True)
class BanknotesPack:
    """A number of notes of one denomination."""

    banknote: Banknote
    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"Banknote count must be an integer, got {self.count!r}")
        if self.count < 0:
            raise ValueError(f"Banknote count cannot be negative: {self.count}")

    @classmethod
    def create(cls, count: int, banknote: Banknote) -> "BanknotesPack":
        return cls(banknote=banknote, count=count)

    @property
    def value(self) -> int:
        """Total face value of the pack."""
        return self.banknote.face_value * self.count


@dataclass(frozen=True)
class Withdrawal:
    """Notes paid out by one successful withdrawal.

    The packs are copied into a tuple on creation, so a withdrawal never
    shares state with the deposit it was taken from.
    """

    packs: tuple[BanknotesPack, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "packs", tuple(self.packs))

    @classmethod
    def create(cls, packs: Iterable[BanknotesPack]) -> "Withdrawal":
        return cls(tuple(packs))

    @property
    def currency(self) -> str | None:
        return self.packs[0].banknote.currency if self.packs else None

    def count_of(self, banknote: Banknote) -> int:
        """Number of notes of the given denomination in the withdrawal."""
        return sum(pack.count for pack in self.packs if pack.banknote is banknote)

    def total_value(self) -> int:
        return sum(pack.value for pack in self.packs)

    def __iter__(self) -> Iterator[BanknotesPack]:
        return iter(self.packs)

    def __len__(self) -> int:
        return len(self.packs)
