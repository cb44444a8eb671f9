"""In-memory cash inventory."""

from cashpoint.store.deposit import MoneyDeposit

__all__ = ["MoneyDeposit"]
