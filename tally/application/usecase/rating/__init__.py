"""Rating use cases."""

from .get_rating import GetRatingRequest, GetRatingResponse, GetRatingUseCase

__all__ = [
    "GetRatingRequest",
    "GetRatingResponse",
    "GetRatingUseCase",
]
