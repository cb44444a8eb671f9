"""Automated teller machine: runs a withdrawal against the bank and the deposit."""

from __future__ import annotations

import logging

from cashpoint.allocator import allocate, validate_amount
from cashpoint.bank import Bank
from cashpoint.config import CashpointConfig
from cashpoint.exceptions import (
    ATMOperationError,
    InvalidAmountError,
    InvalidDepositError,
    UnsatisfiableAmountError,
)
from cashpoint.logging import configure_logging
from cashpoint.models import Card, ErrorCode, Money, PinCode, Withdrawal
from cashpoint.store import MoneyDeposit

logger = logging.getLogger(__name__)


class ATMachine:
    """Cash machine for a single currency.

    A withdrawal runs these steps in order and stops at the first failure:

    1. the requested currency must be the machine currency
    2. the amount must be a positive multiple of the smallest note
    3. the bank authorizes the card and PIN
    4. notes are picked from the deposit (read only)
    5. the bank charges the account with the token from step 3
    6. the picked notes are removed from the deposit

    The deposit changes only in step 6, so any failure leaves it intact.
    An authorization is not reversed when a later step fails. Any exception
    raised by the bank, including timeouts and connection errors, ends the
    withdrawal with the error code of the step that called it.

    Parameters
    ----------
    bank : Bank
        Authorization and account backend.
    currency : str
        Currency of the notes the machine holds.
    machine_id : str
        Identifier used in log records.
    """

    def __init__(self, bank: Bank, currency: str = "PLN", machine_id: str = "atm-001") -> None:
        self.bank = bank
        self.currency = currency.upper()
        self.machine_id = machine_id
        self._deposit = MoneyDeposit.empty(self.currency)

    @classmethod
    def from_config(cls, config: CashpointConfig, bank: Bank) -> ATMachine:
        """Build a machine from config.

        Applies the logging settings, then loads the starting deposit if one
        is configured.
        """
        configure_logging(config.logging)
        atm = cls(bank, currency=config.machine.currency, machine_id=config.machine.machine_id)
        if config.initial_deposit:
            atm.set_deposit(config.build_deposit())
        return atm

    def get_current_deposit(self) -> MoneyDeposit:
        """Return a snapshot of the deposit; changing it does not affect the machine."""
        return self._deposit.copy()

    def set_deposit(self, deposit: MoneyDeposit) -> None:
        """Replace the whole deposit, e.g. after the machine is refilled."""
        if deposit.currency != self.currency:
            raise InvalidDepositError(
                f"Deposit in {deposit.currency} cannot be loaded into a {self.currency} machine"
            )
        self._deposit = deposit.copy()
        logger.info(
            "Deposit loaded: %s %s",
            deposit.total_value(),
            self.currency,
            extra={"extra": {"machine_id": self.machine_id, "deposit": self._deposit.copy()}},
        )

    def withdraw(self, pin: PinCode, card: Card, money: Money) -> Withdrawal:
        """Pay out ``money`` to the holder of ``card``.

        Raises
        ------
        ATMOperationError
            With ``WRONG_CURRENCY``, ``WRONG_AMOUNT``, ``AUTHORIZATION`` or
            ``NO_FUNDS_ON_ACCOUNT`` as the error code.
        """
        if money.currency != self.currency:
            raise self._fail(
                ErrorCode.WRONG_CURRENCY,
                f"Machine pays out {self.currency}, requested {money.currency}",
            )

        try:
            validate_amount(money.amount, self.currency)
        except InvalidAmountError as exc:
            raise self._fail(ErrorCode.WRONG_AMOUNT, str(exc)) from exc

        try:
            token = self.bank.authorize(pin.code, card.number)
        except Exception as exc:
            raise self._fail(ErrorCode.AUTHORIZATION, str(exc)) from exc

        try:
            breakdown = allocate(money.amount, self._deposit)
        except UnsatisfiableAmountError as exc:
            raise self._fail(ErrorCode.WRONG_AMOUNT, str(exc)) from exc

        try:
            self.bank.charge(token, money)
        except Exception as exc:
            raise self._fail(ErrorCode.NO_FUNDS_ON_ACCOUNT, str(exc)) from exc

        self._deposit.apply_withdrawal(breakdown)
        withdrawal = Withdrawal.create(breakdown)
        logger.info(
            "Withdrawal of %s completed",
            money,
            extra={"extra": {"machine_id": self.machine_id, "withdrawal": withdrawal}},
        )
        return withdrawal

    def _fail(self, error_code: ErrorCode, message: str) -> ATMOperationError:
        logger.warning(
            "Withdrawal rejected (%s): %s",
            error_code.value,
            message,
            extra={"extra": {"machine_id": self.machine_id, "error_code": error_code.value}},
        )
        return ATMOperationError(error_code, message)
