"""Card and PIN generator."""

from typing import Iterator

from cashpoint.generators.base import BaseGenerator
from cashpoint.models import Card, PinCode


class CardGenerator(BaseGenerator):
    """Generate card numbers and PINs for demos and tests.

    Card numbers come from Faker's credit card provider, so they pass the
    Luhn check and carry a realistic issuer prefix.
    """

    CARD_TYPES = ["visa16", "mastercard", "maestro"]

    def generate(self) -> Card:
        card_type = self.random.choice(self.CARD_TYPES)
        return Card(self.fake.credit_card_number(card_type=card_type))

    def generate_pin(self) -> PinCode:
        return PinCode(tuple(self.random.randint(0, 9) for _ in range(PinCode.LENGTH)))

    def generate_credentials(self, count: int) -> Iterator[tuple[Card, PinCode]]:
        """Yield ``count`` (card, PIN) pairs with distinct card numbers."""
        seen: set[str] = set()
        while len(seen) < count:
            card = self.generate()
            if card.number in seen:
                continue
            seen.add(card.number)
            yield card, self.generate_pin()
