"""Domain model entities for Tally."""

from tally.domain.model.ledger import (
    ItemAggregate,
    LedgerDocument,
    LedgerSnapshot,
    VoteRecord,
)

__all__ = [
    "ItemAggregate",
    "LedgerDocument",
    "LedgerSnapshot",
    "VoteRecord",
]
