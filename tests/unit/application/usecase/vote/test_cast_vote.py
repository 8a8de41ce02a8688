"""Unit tests for CastVoteUseCase."""

import pytest

from tally.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from tally.domain.error import CooldownRejection, StoreUnavailable
from tally.domain.service import VoteLedger
from tally.domain.value import ItemId, VoteDirection
from tally.persistence.repository.inmemory import InMemoryDocumentStore
from tests.harness import COOLDOWN_MS, create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(user_hash: str = "u1", direction: VoteDirection = VoteDirection.UP):
    return CastVoteRequest(
        item_id="a",
        direction=direction,
        user_hash=user_hash,
        user_agent="agent1",
        source_address="198.51.100.4",
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_accepted_vote_returns_rating(self, unit_env):
        """An accepted vote should report success and the new totals."""
        use_case = await unit_env.get(CastVoteUseCase)

        response = await use_case.execute(_request())

        assert response.success is True
        assert response.rating == 1
        assert response.votes == 1

    @pytest.mark.asyncio
    async def test_source_address_is_recorded(self, unit_env):
        """The transport-resolved address should be stored with the vote."""
        use_case = await unit_env.get(CastVoteUseCase)
        store = await unit_env.get(InMemoryDocumentStore)

        await use_case.execute(_request())

        record = store.document.get(ItemId("a")).history[-1]
        assert record.source_address == "198.51.100.4"
        assert record.voter.user_hash == "u1"
        assert record.voter.user_agent == "agent1"

    @pytest.mark.asyncio
    async def test_repeat_vote_raises_cooldown(self, unit_env):
        """A repeat vote should raise CooldownRejection with the full window."""
        use_case = await unit_env.get(CastVoteUseCase)

        await use_case.execute(_request())

        with pytest.raises(CooldownRejection) as exc_info:
            await use_case.execute(_request(direction=VoteDirection.DOWN))

        assert exc_info.value.retry_after_ms == COOLDOWN_MS

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, unit_env):
        """Save failure should propagate as StoreUnavailable."""
        use_case = await unit_env.get(CastVoteUseCase)
        store = await unit_env.get(InMemoryDocumentStore)
        store.fail_save = True

        with pytest.raises(StoreUnavailable):
            await use_case.execute(_request())

    @pytest.mark.asyncio
    async def test_use_case_can_be_built_directly(self, unit_env):
        """Use case should work with a ledger resolved from the container."""
        ledger = await unit_env.get(VoteLedger)
        use_case = CastVoteUseCase(vote_ledger=ledger)

        response = await use_case.execute(_request(user_hash="u7"))

        assert response.votes == 1
