"""Rating routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tally.application.usecase.rating import (
    GetRatingRequest,
    GetRatingResponse,
    GetRatingUseCase,
)
from tally.domain.error import StoreUnavailable

router = APIRouter(tags=["ratings"], route_class=DishkaRoute)


@router.get(
    "/rating/{item_id}",
    response_model=GetRatingResponse,
    responses={500: {"description": "Ledger could not be loaded"}},
)
async def get_rating(
    item_id: str,
    get_rating_use_case: FromDishka[GetRatingUseCase],
) -> GetRatingResponse | JSONResponse:
    """Get an item's rating and vote count.

    Items without votes report zeros rather than 404.
    """
    try:
        return await get_rating_use_case.execute(GetRatingRequest(item_id=item_id))
    except StoreUnavailable as e:
        logfire.error("Rating load failed", item_id=item_id, error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "load_failed"},
        )
