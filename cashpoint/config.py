"""Configuration management for cashpoint."""

from dataclasses import dataclass, field

from cashpoint.exceptions import ConfigurationError
from cashpoint.models import BanknotesPack, denominations
from cashpoint.store import MoneyDeposit


@dataclass
class MachineConfig:
    """Identity and currency of one machine."""

    currency: str = "PLN"
    machine_id: str = "atm-001"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class CashpointConfig:
    """Main configuration for cashpoint."""

    machine: MachineConfig = field(default_factory=MachineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    initial_deposit: dict[int, int] | None = None  # face value -> note count

    def build_deposit(self) -> MoneyDeposit:
        """Create the starting deposit described by ``initial_deposit``.

        Raises
        ------
        ConfigurationError
            If a face value has no banknote in the machine currency, or a
            count is negative.
        """
        by_value = {note.face_value: note for note in denominations(self.machine.currency)}
        packs = []
        for face_value, count in (self.initial_deposit or {}).items():
            note = by_value.get(int(face_value))
            if note is None:
                raise ConfigurationError(
                    f"No {self.machine.currency} banknote with face value {face_value}"
                )
            try:
                packs.append(BanknotesPack(note, int(count)))
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc
        return MoneyDeposit.create(self.machine.currency, packs)

    @classmethod
    def from_env(cls) -> "CashpointConfig":
        """Create config from environment variables."""
        import json
        import os

        machine = MachineConfig(
            currency=os.getenv("ATM_CURRENCY", "PLN").upper(),
            machine_id=os.getenv("ATM_MACHINE_ID", "atm-001"),
        )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
        )

        deposit_str = os.getenv("INITIAL_DEPOSIT")
        try:
            raw_deposit = json.loads(deposit_str) if deposit_str else None
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"INITIAL_DEPOSIT is not valid JSON: {exc}") from exc
        initial_deposit = (
            {int(value): int(count) for value, count in raw_deposit.items()}
            if raw_deposit
            else None
        )

        return cls(
            machine=machine,
            logging=logging_config,
            initial_deposit=initial_deposit,
        )
