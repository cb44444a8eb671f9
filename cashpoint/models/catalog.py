"""Denomination catalog: which banknotes exist for each currency."""

from cashpoint.exceptions import UnsupportedCurrencyError
from cashpoint.models.enums import Banknote


def supported_currencies() -> list[str]:
    """Return currency codes that have banknotes defined, in declaration order."""
    seen: list[str] = []
    for note in Banknote:
        if note.currency not in seen:
            seen.append(note.currency)
    return seen


def denominations(currency: str) -> list[Banknote]:
    """Return the banknotes of a currency, highest face value first.

    Parameters
    ----------
    currency : str
        ISO 4217 currency code.

    Returns
    -------
    list[Banknote]
        Banknotes ordered by descending face value.

    Raises
    ------
    UnsupportedCurrencyError
        If the currency has no banknotes.
    """
    notes = [note for note in Banknote if note.currency == currency.upper()]
    if not notes:
        raise UnsupportedCurrencyError(f"No banknotes defined for currency {currency}")
    return sorted(notes, key=lambda note: note.face_value, reverse=True)


def smallest_denomination(currency: str) -> Banknote:
    """Return the banknote with the lowest face value for a currency."""
    return denominations(currency)[-1]
