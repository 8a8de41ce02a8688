"""Tally: item ratings from +1/-1 votes with a per-voter cooldown."""

__version__ = "0.1.0"
