"""
Game Reviews Backend — Review Service Unit Tests
==================================================

What:  ReviewService row shaping and not-found handling.
How:   Mock DB sessions (no real database).
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.exceptions import NotFoundError
from app.services.review_service import ReviewService


def make_review(review_id=1, **overrides):
    fields = {
        "review_id": review_id,
        "title": "Agricola",
        "category": "euro game",
        "designer": "Uwe Rosenberg",
        "owner": "mallionaire",
        "review_body": "Farmyard fun!",
        "review_img_url": None,
        "created_at": datetime(2021, 1, 18, 10, 0, 20, tzinfo=timezone.utc),
        "votes": 1,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestListReviews:

    def setup_method(self):
        self.service = ReviewService()

    @pytest.mark.asyncio
    async def test_comment_count_is_int(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.all.return_value = [(make_review(2), 3), (make_review(1), 0)]
        mock_db_session.execute.return_value = mock_result

        reviews = await self.service.list_reviews(mock_db_session)

        assert [r.review_id for r in reviews] == [2, 1]
        assert [r.comment_count for r in reviews] == [3, 0]
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_string_count_is_coerced(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.all.return_value = [(make_review(), "5")]
        mock_db_session.execute.return_value = mock_result

        reviews = await self.service.list_reviews(mock_db_session)

        assert reviews[0].comment_count == 5

    @pytest.mark.asyncio
    async def test_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await self.service.list_reviews(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_item_has_no_body(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.all.return_value = [(make_review(), 0)]
        mock_db_session.execute.return_value = mock_result

        reviews = await self.service.list_reviews(mock_db_session)

        assert "review_body" not in reviews[0].model_dump()


class TestGetReview:

    def setup_method(self):
        self.service = ReviewService()

    @pytest.mark.asyncio
    async def test_found(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = make_review(4, votes=7)
        mock_db_session.execute.return_value = mock_result

        review = await self.service.get_review(mock_db_session, 4)

        assert review.review_id == 4
        assert review.votes == 7
        assert review.review_body == "Farmyard fun!"

    @pytest.mark.asyncio
    async def test_not_found_message(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_review(mock_db_session, 100)

        assert exc_info.value.message == "No review found for review 100"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self, mock_db_session):
        mock_db_session.execute.side_effect = RuntimeError("driver exploded")

        with pytest.raises(RuntimeError):
            await self.service.get_review(mock_db_session, 1)
