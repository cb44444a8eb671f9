"""Tests for sample data generators."""

from cashpoint.generators import CardGenerator, DepositGenerator
from cashpoint.models import Card, PinCode


def luhn_valid(number: str) -> bool:
    total = 0
    for i, digit in enumerate(reversed(number)):
        d = int(digit)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


class TestCardGenerator:
    """Tests for CardGenerator."""

    def test_generate_card(self, seed: int) -> None:
        card = CardGenerator(seed=seed).generate()

        assert isinstance(card, Card)
        assert card.number.isdigit()
        assert luhn_valid(card.number)

    def test_generate_pin(self, seed: int) -> None:
        pin = CardGenerator(seed=seed).generate_pin()

        assert isinstance(pin, PinCode)
        assert len(pin.code) == 4

    def test_reproducible(self, seed: int) -> None:
        first = CardGenerator(seed=seed)
        second = CardGenerator(seed=seed)

        assert first.generate() == second.generate()
        assert first.generate_pin() == second.generate_pin()

    def test_generate_credentials_unique(self, seed: int) -> None:
        pairs = list(CardGenerator(seed=seed).generate_credentials(20))

        assert len(pairs) == 20
        assert len({card.number for card, _ in pairs}) == 20


class TestDepositGenerator:
    """Tests for DepositGenerator."""

    def test_generate_deposit(self, seed: int) -> None:
        deposit = DepositGenerator("EUR", seed=seed).generate(max_count=10)

        assert deposit.currency == "EUR"
        assert all(0 <= pack.count <= 10 for pack in deposit.packs)

    def test_empty_rate_one(self, seed: int) -> None:
        deposit = DepositGenerator(seed=seed).generate(empty_rate=1.0)

        assert deposit.total_value() == 0

    def test_generate_amount_in_range(self, seed: int) -> None:
        gen = DepositGenerator("PLN", seed=seed)

        for _ in range(20):
            deposit = gen.generate()
            amount = gen.generate_amount(deposit)
            assert amount % 10 == 0
            assert 10 <= amount <= max(deposit.total_value(), 10)

    def test_reproducible(self, seed: int) -> None:
        assert DepositGenerator(seed=seed).generate() == DepositGenerator(seed=seed).generate()
