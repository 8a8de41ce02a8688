"""Ledger entities.

The ledger is a single document holding one aggregate per item. Each
aggregate keeps its running rating, its vote count and the full,
chronologically ordered history of accepted votes.
"""

from typing import Any, Optional

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.value import ItemId, Rating, Revision, VoteDirection, VoterIdentity


class VoteRecord(DomainModel):
    """An accepted vote.

    ``timestamp`` is assigned by the server (epoch milliseconds) when the
    vote is admitted. ``source_address`` is informational only.
    """

    direction: VoteDirection
    voter: VoterIdentity
    source_address: str = "unknown"
    timestamp: int
    unknown_fields: dict[str, Any] = Field(default_factory=dict)


class ItemAggregate(DomainModel):
    """Per-item aggregate.

    Business rules:
    - rating is the sum of history directions
    - vote_count is the length of history
    - history is append-only and never pruned

    ``unknown_fields`` holds stored keys this service does not interpret;
    they are carried through every update.
    """

    rating: int = 0
    vote_count: int = 0
    history: tuple[VoteRecord, ...] = ()
    unknown_fields: dict[str, Any] = Field(default_factory=dict)

    def last_vote_by(self, voter: VoterIdentity) -> Optional[VoteRecord]:
        """Find the most recent vote cast by a voter identity.

        History is chronological, so the scan runs from the end; it still
        covers the whole history because the voter's latest vote need not be
        the latest vote overall.
        """
        for record in reversed(self.history):
            if record.voter == voter:
                return record
        return None

    def record(self, vote: VoteRecord) -> "ItemAggregate":
        """Return a new aggregate with the vote applied."""
        return ItemAggregate(
            rating=self.rating + int(vote.direction),
            vote_count=self.vote_count + 1,
            history=(*self.history, vote),
            unknown_fields=self.unknown_fields,
        )

    def to_rating(self) -> Rating:
        return Rating(rating=self.rating, votes=self.vote_count)


class LedgerDocument(DomainModel):
    """The whole ledger: item id -> aggregate."""

    items: dict[ItemId, ItemAggregate] = Field(default_factory=dict)
    unknown_fields: dict[str, Any] = Field(default_factory=dict)

    def get(self, item_id: ItemId) -> Optional[ItemAggregate]:
        return self.items.get(item_id)

    def rating_of(self, item_id: ItemId) -> Rating:
        """Rating of an item; items without votes read as zeros."""
        aggregate = self.items.get(item_id)
        return aggregate.to_rating() if aggregate else Rating()

    def with_item(self, item_id: ItemId, aggregate: ItemAggregate) -> "LedgerDocument":
        """Return a new document with the item's aggregate replaced."""
        return LedgerDocument(
            items={**self.items, item_id: aggregate},
            unknown_fields=self.unknown_fields,
        )


class LedgerSnapshot(DomainModel):
    """A loaded document together with the store revision it was read at.

    ``revision`` is None when the store has no document yet or does not
    track revisions.
    """

    document: LedgerDocument
    revision: Optional[Revision] = None
