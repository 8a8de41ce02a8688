"""Cast vote use case."""

from pydantic import BaseModel, Field

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteLedger
from tally.domain.value import ItemId, VoteDirection, VoterIdentity


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    item_id: str = Field(min_length=1)
    direction: VoteDirection
    user_hash: str = Field(min_length=1)
    user_agent: str = Field(min_length=1)
    source_address: str = "unknown"  # Resolved by the transport


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool = True
    rating: int
    votes: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for casting a vote on an item."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize cast vote use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        Args:
            request: Cast vote request

        Returns:
            The item's rating after the vote

        Raises:
            CooldownRejection: If the voter voted on the item too recently
            StoreUnavailable: If the vote could not be persisted
        """
        rating = await self.vote_ledger.apply_vote(
            item_id=ItemId(request.item_id),
            voter=VoterIdentity(
                user_hash=request.user_hash, user_agent=request.user_agent
            ),
            direction=request.direction,
            source_address=request.source_address,
        )

        return CastVoteResponse(rating=rating.rating, votes=rating.votes)
