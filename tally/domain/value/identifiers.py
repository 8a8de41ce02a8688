"""Strongly typed identifiers for Tally domain entities."""

from typing import NewType

# Opaque, caller-chosen item identifier (never empty)
ItemId = NewType("ItemId", str)

# Store revision token (GitHub blob SHA, file content hash, ...)
Revision = NewType("Revision", str)
