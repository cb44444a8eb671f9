"""Bank collaborators."""

from cashpoint.bank.base import Bank
from cashpoint.bank.memory import CardAccount, InMemoryBank

__all__ = ["Bank", "CardAccount", "InMemoryBank"]
