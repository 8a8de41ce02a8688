"""Application layer DI providers."""

from dishka import Scope, provide

from tally.application.usecase.rating import GetRatingUseCase
from tally.application.usecase.vote import CastVoteUseCase
from tally.domain.service import VoteLedger
from tally.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_rating_use_case(self, vote_ledger: VoteLedger) -> GetRatingUseCase:
        """Provide get rating use case."""
        return GetRatingUseCase(vote_ledger=vote_ledger)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_ledger: VoteLedger) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_ledger=vote_ledger)
