"""Mappers between domain models and the stored JSON document."""

from tally.domain.model.ledger import ItemAggregate, LedgerDocument, VoteRecord
from tally.domain.value import ItemId, VoteDirection, VoterIdentity
from tally.persistence.schema import HistoryEntryRecord, ItemRecord, LedgerRecord


def vote_record_to_domain(entry: HistoryEntryRecord) -> VoteRecord:
    """Convert a history entry to a VoteRecord.

    Raises:
        ValueError: If the stored vote is not +1/-1 or the identity is empty
    """
    return VoteRecord(
        direction=VoteDirection(entry.vote),
        voter=VoterIdentity(user_hash=entry.user_hash, user_agent=entry.user_agent),
        source_address=entry.ip,
        timestamp=entry.ts,
        unknown_fields=dict(entry.model_extra or {}),
    )


def vote_record_to_entry(record: VoteRecord) -> HistoryEntryRecord:
    """Convert a VoteRecord to a history entry."""
    return HistoryEntryRecord(
        vote=int(record.direction),
        user_hash=record.voter.user_hash,
        user_agent=record.voter.user_agent,
        ip=record.source_address,
        ts=record.timestamp,
        **record.unknown_fields,
    )


def item_to_domain(item: ItemRecord) -> ItemAggregate:
    """Convert a stored item to an ItemAggregate.

    Stored counters are taken as-is; they are only ever written together
    with the history they summarize.
    """
    return ItemAggregate(
        rating=item.rating,
        vote_count=item.votes,
        history=tuple(vote_record_to_domain(entry) for entry in item.history),
        unknown_fields=dict(item.model_extra or {}),
    )


def item_to_record(aggregate: ItemAggregate) -> ItemRecord:
    """Convert an ItemAggregate to a stored item."""
    return ItemRecord(
        rating=aggregate.rating,
        votes=aggregate.vote_count,
        history=[vote_record_to_entry(record) for record in aggregate.history],
        **aggregate.unknown_fields,
    )


def document_to_domain(record: LedgerRecord) -> LedgerDocument:
    """Convert the stored root to a LedgerDocument."""
    return LedgerDocument(
        items={
            ItemId(item_id): item_to_domain(item)
            for item_id, item in record.items.items()
        },
        unknown_fields=dict(record.model_extra or {}),
    )


def document_to_record(document: LedgerDocument) -> LedgerRecord:
    """Convert a LedgerDocument to the stored root."""
    return LedgerRecord(
        items={
            str(item_id): item_to_record(aggregate)
            for item_id, aggregate in document.items.items()
        },
        **document.unknown_fields,
    )


def decode_document(content: str | bytes) -> LedgerDocument:
    """Parse JSON text into a LedgerDocument.

    Empty content is not a document; stores decide what an absent document
    means before calling this.

    Raises:
        ValueError: If the content is not a valid ledger document
    """
    return document_to_domain(LedgerRecord.model_validate_json(content))


def encode_document(document: LedgerDocument) -> str:
    """Serialize a LedgerDocument to indented JSON text."""
    return document_to_record(document).model_dump_json(indent=2)
