"""Unit tests for the use case base class."""

import pytest

from tally.application.usecase.base import BaseUseCase
from tally.application.usecase.rating import (
    GetRatingRequest,
    GetRatingResponse,
    GetRatingUseCase,
)


class TestBaseUseCase:
    """Tests for BaseUseCase."""

    def test_execute_is_required(self):
        class Incomplete(BaseUseCase[GetRatingRequest, GetRatingResponse]):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_parameterized_by_request_and_response(self):
        (base,) = GetRatingUseCase.__orig_bases__

        assert base.__args__ == (GetRatingRequest, GetRatingResponse)
