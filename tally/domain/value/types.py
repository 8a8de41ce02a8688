"""Domain value objects for Tally.

Value objects are immutable and defined by their values, not identity.
"""

from enum import IntEnum

from pydantic import field_validator

from tally.domain.value.common import ValueObject


class VoteDirection(IntEnum):
    """Direction of a vote, added to the item rating as-is."""

    UP = 1
    DOWN = -1


class VoterIdentity(ValueObject):
    """Caller-supplied pair recognising a repeat voter.

    Not a verified account: both parts come from the client. Two identities
    are the same voter only if both strings are exactly equal.
    """

    user_hash: str
    user_agent: str

    @field_validator("user_hash", "user_agent")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate both parts are present."""
        if not v:
            raise ValueError("Voter identity parts must not be empty")
        return v


class Rating(ValueObject):
    """Aggregate score of an item."""

    rating: int = 0
    votes: int = 0
