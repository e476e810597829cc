"""
Game Reviews Backend — Comment Service Unit Tests
===================================================

What:  CommentService validation, integrity mapping and vote increments.
How:   Mock DB sessions; the SQL itself is covered by test_api.py.

What we test:
    ✅ Missing/blank username or body is rejected before any SQL
    ✅ Foreign key violations become NotFoundError("Not found")
    ✅ New comments start at 0 votes
    ✅ Unknown review is reported before comments are queried
    ✅ Unknown comment on vote increment
    ✅ Vote totals that overflow the column become ValidationError
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import DataError, IntegrityError

from app.exceptions import NotFoundError, ValidationError
from app.services.comment_service import CommentService


class TestCreateComment:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username, body",
        [(None, "Great game!"), ("mallionaire", None), ("", "x"), ("mallionaire", "  "), (5, "x")],
    )
    async def test_incomplete_rejected_without_sql(self, mock_db_session, username, body):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_comment(mock_db_session, 4, username, body)

        assert exc_info.value.message == "Bad request - incomplete information"
        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_integrity_error_is_not_found(self, mock_db_session):
        mock_db_session.flush.side_effect = IntegrityError(
            "INSERT INTO comments ...", {}, Exception("FOREIGN KEY constraint failed")
        )

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.create_comment(mock_db_session, 4, "nobody", "Great game!")

        assert exc_info.value.message == "Not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_success_starts_at_zero_votes(self, mock_db_session):
        async def assign_generated_columns():
            added = mock_db_session.add.call_args.args[0]
            added.comment_id = 19
            added.created_at = datetime.now(timezone.utc)

        mock_db_session.flush.side_effect = assign_generated_columns

        comment = await self.service.create_comment(
            mock_db_session, 4, "mallionaire", "Great game!"
        )

        assert comment.comment_id == 19
        assert comment.votes == 0
        assert comment.author == "mallionaire"
        assert comment.review_id == 4
        mock_db_session.flush.assert_awaited_once()


class TestListComments:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_unknown_review_checked_first(self, mock_db_session):
        missing = MagicMock()
        missing.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = missing

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.list_comments_for_review(mock_db_session, 1000)

        assert exc_info.value.message == "No review found for review 1000"
        assert mock_db_session.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_existing_review_without_comments(self, mock_db_session):
        exists = MagicMock()
        exists.scalar_one_or_none.return_value = 5
        no_comments = MagicMock()
        no_comments.scalars.return_value.all.return_value = []
        mock_db_session.execute.side_effect = [exists, no_comments]

        assert await self.service.list_comments_for_review(mock_db_session, 5) == []


class TestIncrementVotes:

    def setup_method(self):
        self.service = CommentService()

    @pytest.mark.asyncio
    async def test_returns_updated_comment(self, mock_db_session):
        updated = SimpleNamespace(
            comment_id=1,
            body="I loved this game too!",
            votes=20,
            author="bainesface",
            review_id=2,
            created_at=datetime(2017, 11, 22, 12, 43, 33, tzinfo=timezone.utc),
        )
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = updated
        mock_db_session.execute.return_value = mock_result

        comment = await self.service.increment_votes(mock_db_session, 1, 4)

        assert comment.votes == 20
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_comment(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.increment_votes(mock_db_session, 999, 1)

        assert exc_info.value.message == "No comment found for comment 999"

    @pytest.mark.asyncio
    async def test_out_of_range_total_is_bad_request(self, mock_db_session):
        mock_db_session.execute.side_effect = DataError(
            "UPDATE comments", {}, Exception("integer out of range")
        )

        with pytest.raises(ValidationError) as exc_info:
            await self.service.increment_votes(mock_db_session, 1, 2_147_483_647)

        assert exc_info.value.message == "Bad request"
        assert exc_info.value.status_code == 400
