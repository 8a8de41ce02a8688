"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from tally.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from tally.domain.error import CooldownRejection, StoreUnavailable
from tally.domain.value import VoteDirection
from tally.interface.api.client_address import resolve_source_address

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Body of POST /vote."""

    item_id: str = Field(min_length=1)
    vote: int
    user_hash: str = Field(min_length=1)
    user_agent: str = Field(min_length=1)

    @field_validator("vote", mode="before")
    @classmethod
    def validate_vote(cls, v: object) -> int:
        """Accept exactly 1 or -1; booleans and strings are rejected."""
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v not in (1, -1):
            raise ValueError("vote must be 1 or -1")
        return int(v)


@router.post(
    "/vote",
    response_model=CastVoteResponse,
    responses={
        400: {"description": "Missing field or vote not 1/-1"},
        429: {"description": "Voter is in cooldown"},
        500: {"description": "Vote could not be stored"},
    },
)
async def cast_vote(
    body: VoteBody,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse | JSONResponse:
    """Cast a +1/-1 vote on an item.

    Args:
        body: Vote payload
        request: Incoming request (for the client address)
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        Success flag and the item's updated rating, or a cooldown/failure
        response
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                item_id=body.item_id,
                direction=VoteDirection(body.vote),
                user_hash=body.user_hash,
                user_agent=body.user_agent,
                source_address=resolve_source_address(request),
            )
        )
    except CooldownRejection as e:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"message": "cooldown", "retry_after_ms": e.retry_after_ms},
        )
    except StoreUnavailable as e:
        logfire.error("Vote failed", item_id=body.item_id, error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "vote_failed"},
        )
