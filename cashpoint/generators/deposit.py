"""Deposit generator."""

from cashpoint.generators.base import BaseGenerator
from cashpoint.models import BanknotesPack, denominations
from cashpoint.store import MoneyDeposit


class DepositGenerator(BaseGenerator):
    """Generate deposits with random note counts.

    Parameters
    ----------
    currency : str
        Currency of the generated deposits.
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(self, currency: str = "PLN", seed: int | None = None) -> None:
        super().__init__(seed)
        self.currency = currency
        self.notes = denominations(currency)

    def generate(self, max_count: int = 50, empty_rate: float = 0.2) -> MoneyDeposit:
        """Generate one deposit.

        Parameters
        ----------
        max_count : int
            Upper bound of notes per denomination.
        empty_rate : float
            Probability that a denomination is left at zero.
        """
        packs = []
        for note in self.notes:
            count = 0 if self.random.random() < empty_rate else self.random.randint(0, max_count)
            packs.append(BanknotesPack(note, count))
        return MoneyDeposit.create(self.currency, packs)

    def generate_amount(self, deposit: MoneyDeposit) -> int:
        """Pick an amount between the smallest note and the deposit total, in note steps."""
        step = self.notes[-1].face_value
        upper = max(deposit.total_value() // step, 1)
        return self.random.randint(1, upper) * step
