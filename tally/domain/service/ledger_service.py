"""Vote ledger domain service."""

import asyncio
from typing import Optional

import logfire

from tally.domain.error import CooldownRejection, ValidationError
from tally.domain.model.ledger import ItemAggregate, VoteRecord
from tally.domain.repository import DocumentStore
from tally.domain.value import ItemId, Rating, VoteDirection, VoterIdentity

from .base import Service
from .clock import Clock

# 30 days
DEFAULT_COOLDOWN_MS = 30 * 24 * 60 * 60 * 1000


def _require_item_id(item_id: ItemId) -> None:
    if not item_id:
        raise ValidationError("item_id must not be empty")


class VoteLedger(Service):
    """Domain service owning item ratings and the vote admission rule.

    Every operation reads the document fresh from the store; nothing is
    cached between calls. Store failures propagate as ``StoreUnavailable``
    and are never retried.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        clock: Clock,
        cooldown_ms: int = DEFAULT_COOLDOWN_MS,
        write_lock: Optional[asyncio.Lock] = None,
    ) -> None:
        """Initialize vote ledger.

        Args:
            document_store: Store holding the ledger document
            clock: Time source for vote timestamps
            cooldown_ms: Minimum time between two votes of one voter identity
            write_lock: Lock serializing read-modify-write cycles; share one
                lock per document store across requests
        """
        self.document_store = document_store
        self.clock = clock
        self.cooldown_ms = cooldown_ms
        self.write_lock = write_lock or asyncio.Lock()

    async def get_rating(self, item_id: ItemId) -> Rating:
        """Get the current rating of an item.

        Items nobody voted on read as zeros; reading never creates an entry.

        Raises:
            StoreUnavailable: If the document cannot be loaded
            ValidationError: If item_id is empty
        """
        _require_item_id(item_id)

        with logfire.span("get_rating", item_id=item_id):
            snapshot = await self.document_store.load()
            return snapshot.document.rating_of(item_id)

    async def apply_vote(
        self,
        item_id: ItemId,
        voter: VoterIdentity,
        direction: VoteDirection,
        source_address: str = "unknown",
    ) -> Rating:
        """Admit a vote and persist the updated ledger.

        Args:
            item_id: Item being voted on
            voter: Identity used for the cooldown check
            direction: +1 or -1
            source_address: Client address, stored for information only

        Returns:
            The item's rating after the vote

        Raises:
            CooldownRejection: If the voter's last vote on the item is more
                recent than the cooldown window; nothing is persisted
            StoreUnavailable: If loading or saving fails; the vote is not
                recorded
            ValidationError: If item_id is empty
        """
        _require_item_id(item_id)

        with logfire.span(
            "apply_vote", item_id=item_id, direction=int(direction)
        ):
            async with self.write_lock:
                snapshot = await self.document_store.load()
                now = self.clock.now_ms()

                aggregate = snapshot.document.get(item_id) or ItemAggregate()

                last_vote = aggregate.last_vote_by(voter)
                if last_vote is not None:
                    elapsed = now - last_vote.timestamp
                    # Zero elapsed time is still inside the window
                    if elapsed < self.cooldown_ms:
                        retry_after_ms = self.cooldown_ms - elapsed
                        logfire.info(
                            "Vote rejected by cooldown",
                            item_id=item_id,
                            retry_after_ms=retry_after_ms,
                        )
                        raise CooldownRejection(item_id, retry_after_ms)

                updated = aggregate.record(
                    VoteRecord(
                        direction=direction,
                        voter=voter,
                        source_address=source_address,
                        timestamp=now,
                    )
                )
                document = snapshot.document.with_item(item_id, updated)

                await self.document_store.save(
                    document,
                    snapshot.revision,
                    message=f"vote: {item_id} ({int(direction)})",
                )

            logfire.info(
                "Vote recorded",
                item_id=item_id,
                direction=int(direction),
                rating=updated.rating,
                votes=updated.vote_count,
            )
            return updated.to_rating()
