"""Domain value objects for Tally."""

from tally.domain.value.identifiers import ItemId, Revision
from tally.domain.value.types import Rating, VoteDirection, VoterIdentity

__all__ = [
    # Identifiers
    "ItemId",
    "Revision",
    # Types
    "Rating",
    "VoteDirection",
    "VoterIdentity",
]
