"""Custom exception hierarchy for cashpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashpoint.models.enums import ErrorCode


class CashpointError(Exception):
    """Base exception for all cashpoint errors."""


class ConfigurationError(CashpointError):
    """Raised when configuration is invalid or missing."""


class UnsupportedCurrencyError(ConfigurationError):
    """Raised when no banknotes are defined for a currency."""


class InvalidDepositError(CashpointError):
    """Raised when a deposit is built or replaced with inconsistent packs."""


class DepositInvariantError(CashpointError):
    """Raised when a withdrawal would take more notes than the deposit holds."""


class WithdrawalAmountError(CashpointError):
    """Base for amounts the machine cannot pay out."""


class InvalidAmountError(WithdrawalAmountError):
    """Raised when an amount is not a positive multiple of the smallest note."""


class UnsatisfiableAmountError(WithdrawalAmountError):
    """Raised when the notes in the deposit cannot make up the amount."""


class BankError(CashpointError):
    """Base for failures reported by the bank."""


class AuthorizationError(BankError):
    """Raised by the bank when a card and PIN pair is rejected."""


class AccountError(BankError):
    """Raised by the bank when an account cannot be charged."""


class ATMOperationError(CashpointError):
    """Raised by the machine when a withdrawal fails.

    Parameters
    ----------
    error_code : ErrorCode
        The single reason the operation failed.
    message : str | None
        Optional human readable detail.
    """

    def __init__(self, error_code: ErrorCode, message: str | None = None) -> None:
        super().__init__(message or error_code.value)
        self.error_code = error_code
