"""Domain services for Tally."""

from .base import Service
from .clock import Clock, FrozenClock, SystemClock
from .ledger_service import DEFAULT_COOLDOWN_MS, VoteLedger

__all__ = [
    "Service",
    "Clock",
    "FrozenClock",
    "SystemClock",
    "DEFAULT_COOLDOWN_MS",
    "VoteLedger",
]
