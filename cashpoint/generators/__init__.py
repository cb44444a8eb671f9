"""Sample data generators for cards, PINs and deposits."""

from cashpoint.generators.base import BaseGenerator
from cashpoint.generators.card import CardGenerator
from cashpoint.generators.deposit import DepositGenerator

__all__ = ["BaseGenerator", "CardGenerator", "DepositGenerator"]
