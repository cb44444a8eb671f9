"""Tests for serialization helpers."""

import json
from decimal import Decimal

from cashpoint.models import Banknote, BanknotesPack, ErrorCode, Money, Withdrawal
from cashpoint.serialization import deposit_to_dict, serialize_value, to_dict
from cashpoint.store import MoneyDeposit


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("10.50")) == "10.50"

    def test_banknote_by_name(self) -> None:
        assert serialize_value(Banknote.PL_100) == "PL_100"

    def test_enum_by_value(self) -> None:
        assert serialize_value(ErrorCode.WRONG_AMOUNT) == "WRONG_AMOUNT"

    def test_nested(self) -> None:
        assert serialize_value({"a": [Decimal("1"), (Decimal("2"),)]}) == {"a": ["1", ["2"]]}

    def test_plain_value(self) -> None:
        assert serialize_value(7) == 7


class TestToDict:
    """Tests for to_dict."""

    def test_money(self) -> None:
        assert to_dict(Money(100, "EUR")) == {"amount": "100", "currency": "EUR"}

    def test_pack(self) -> None:
        assert to_dict(BanknotesPack.create(2, Banknote.PL_50)) == {"banknote": "PL_50", "count": 2}

    def test_withdrawal(self) -> None:
        withdrawal = Withdrawal.create(
            [BanknotesPack.create(1, Banknote.PL_100), BanknotesPack.create(1, Banknote.PL_10)]
        )

        assert to_dict(withdrawal) == {
            "currency": "PLN",
            "total": 110,
            "packs": [
                {"banknote": "PL_100", "count": 1},
                {"banknote": "PL_10", "count": 1},
            ],
        }

    def test_deposit(self) -> None:
        deposit = MoneyDeposit.create("PLN", [BanknotesPack.create(3, Banknote.PL_20)])

        result = to_dict(deposit)

        assert result == deposit_to_dict(deposit)
        assert result["total"] == 60
        assert result["counts"][20] == 3
        assert result["counts"][500] == 0

    def test_json_compatible(self) -> None:
        deposit = MoneyDeposit.create("PLN", [BanknotesPack.create(3, Banknote.PL_20)])

        assert json.loads(json.dumps(to_dict(deposit)))["currency"] == "PLN"

    def test_dict_passthrough(self) -> None:
        assert to_dict({"a": 1}) == {"a": 1}

    def test_other(self) -> None:
        assert to_dict(42) == {"value": "42"}
