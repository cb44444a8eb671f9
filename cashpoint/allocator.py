"""Greedy note selection for a withdrawal.

Notes are taken from the highest denomination down, as many of each as
both the remaining amount and the deposit allow. The result is the
minimal-note breakdown for canonical denomination sets such as PLN, EUR
or USD. There is no backtracking: if the greedy pass leaves a remainder
the amount is reported as unsatisfiable even when some other
combination of notes would have worked.
"""

from decimal import Decimal

from cashpoint.exceptions import InvalidAmountError, UnsatisfiableAmountError
from cashpoint.models import BanknotesPack, denominations, smallest_denomination
from cashpoint.store import MoneyDeposit


def validate_amount(amount: Decimal | int, currency: str) -> int:
    """Check that an amount can be paid in notes of a currency.

    Returns
    -------
    int
        The amount as a whole number.

    Raises
    ------
    InvalidAmountError
        If the amount is not positive, has a fractional part, or is not a
        multiple of the smallest note.
    """
    amount = Decimal(amount)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    if amount != amount.to_integral_value():
        raise InvalidAmountError(f"Amount {amount} is not a whole number")

    smallest = smallest_denomination(currency).face_value
    whole = int(amount)
    if whole % smallest:
        raise InvalidAmountError(f"Amount {whole} is not a multiple of {smallest} {currency}")
    return whole


def allocate(amount: Decimal | int, deposit: MoneyDeposit) -> list[BanknotesPack]:
    """Pick the notes that make up ``amount`` from ``deposit``.

    The deposit is only read.

    Parameters
    ----------
    amount : Decimal | int
        Amount to pay out, in the deposit's currency.
    deposit : MoneyDeposit
        Notes available.

    Returns
    -------
    list[BanknotesPack]
        Packs in descending denomination order, one per denomination used.

    Raises
    ------
    InvalidAmountError
        If the amount is not a positive multiple of the smallest note.
    UnsatisfiableAmountError
        If the available notes cannot make up the exact amount.
    """
    remaining = validate_amount(amount, deposit.currency)
    breakdown: list[BanknotesPack] = []

    for note in denominations(deposit.currency):
        if remaining == 0:
            break
        count = min(remaining // note.face_value, deposit.count_of(note))
        if count:
            breakdown.append(BanknotesPack(note, count))
            remaining -= note.face_value * count

    if remaining:
        raise UnsatisfiableAmountError(
            f"Cannot pay {amount} {deposit.currency} from the deposit, {remaining} left over"
        )
    return breakdown


def can_dispense(amount: Decimal | int, deposit: MoneyDeposit) -> bool:
    """Return True if ``allocate`` would succeed."""
    try:
        allocate(amount, deposit)
    except (InvalidAmountError, UnsatisfiableAmountError):
        return False
    return True
