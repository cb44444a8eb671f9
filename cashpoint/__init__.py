"""Cash dispensing core for an automated teller machine."""

__version__ = "0.1.0"
