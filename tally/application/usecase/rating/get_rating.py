"""Get rating use case."""

from pydantic import BaseModel

from tally.application.usecase.base import BaseUseCase
from tally.domain.service import VoteLedger
from tally.domain.value import ItemId


class GetRatingRequest(BaseModel):
    """Get rating request."""

    item_id: str


class GetRatingResponse(BaseModel):
    """Get rating response."""

    rating: int
    votes: int


class GetRatingUseCase(BaseUseCase[GetRatingRequest, GetRatingResponse]):
    """Use case for reading an item's rating."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetRatingRequest) -> GetRatingResponse:
        """Read the rating; unknown items report zeros.

        Raises:
            StoreUnavailable: If the ledger cannot be loaded
        """
        rating = await self.vote_ledger.get_rating(ItemId(request.item_id))
        return GetRatingResponse(rating=rating.rating, votes=rating.votes)
