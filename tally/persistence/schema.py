"""On-disk layout of the ledger document.

The JSON shape is shared with existing deployments and must not change:

    {"items": {"<item_id>": {"rating": 1, "votes": 1, "history": [
        {"vote": 1, "user_hash": "...", "user_agent": "...", "ip": "...", "ts": 1700000000000}
    ]}}}

Keys outside this layout are kept as they are and written back on save.
"""

from pydantic import BaseModel, ConfigDict, Field


class HistoryEntryRecord(BaseModel):
    """One accepted vote."""

    model_config = ConfigDict(extra="allow")

    vote: int
    user_hash: str
    user_agent: str
    ip: str = "unknown"
    ts: int


class ItemRecord(BaseModel):
    """Aggregate of one item."""

    model_config = ConfigDict(extra="allow")

    rating: int = 0
    votes: int = 0
    history: list[HistoryEntryRecord] = Field(default_factory=list)


class LedgerRecord(BaseModel):
    """Root of the document."""

    model_config = ConfigDict(extra="allow")

    items: dict[str, ItemRecord] = Field(default_factory=dict)
