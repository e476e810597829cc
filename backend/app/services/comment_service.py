"""
Game Reviews Backend — Comment Service
========================================

What:  Comment listing per review, comment creation and vote increments.
Who:   Called by GET/POST /api/reviews/{review_id}/comments and
       PATCH /api/comments/{comment_id}.

Writes are single statements. The session is committed (or rolled back)
by the get_db_session dependency, never here.

Error outcomes:
    list_comments_for_review  unknown review      → NotFoundError (review message)
    create_comment            missing field       → ValidationError (incomplete)
                              unknown user/review → NotFoundError ("Not found")
    increment_votes           unknown comment     → NotFoundError (comment message)
                              votes out of range  → ValidationError ("Bad request")
"""

from typing import Any, List

from sqlalchemy import desc, select, update
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    INCOMPLETE_INFORMATION,
    NOT_FOUND,
    NotFoundError,
    ValidationError,
)
from app.models.comment import Comment
from app.schemas.comment import CommentResponse
from app.services.review_service import review_service


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class CommentService:
    """Stateless query object for comments."""

    async def list_comments_for_review(
        self, db: AsyncSession, review_id: int
    ) -> List[CommentResponse]:
        """
        Comments on one review, newest first.

        The review is looked up before the comments so that an existing
        review without comments yields [] and an unknown one yields 404.
        """
        await review_service.ensure_exists(db, review_id)

        result = await db.execute(
            select(Comment)
            .where(Comment.review_id == review_id)
            .order_by(desc(Comment.created_at))
        )
        return [CommentResponse.model_validate(c) for c in result.scalars().all()]

    async def create_comment(
        self,
        db: AsyncSession,
        review_id: int,
        username: Any,
        body: Any,
    ) -> CommentResponse:
        """
        Insert a comment by `username` on `review_id`.

        votes always starts at 0; comment_id and created_at are generated.
        Referential integrity is left to the database: a foreign key
        violation on author or review_id is reported as NotFoundError.

        Raises:
            ValidationError: username or body missing/blank (no SQL issued)
            NotFoundError:   "Not found" for an unknown username or review
        """
        missing = [
            name for name, value in (("username", username), ("body", body))
            if _is_blank(value)
        ]
        if missing:
            raise ValidationError(
                message=INCOMPLETE_INFORMATION,
                context={"missing": missing},
            )

        comment = Comment(review_id=review_id, author=username, body=body, votes=0)
        db.add(comment)
        try:
            await db.flush()
        except IntegrityError as e:
            raise NotFoundError(
                message=NOT_FOUND,
                context={"review_id": review_id, "username": username},
            ) from e

        return CommentResponse.model_validate(comment)

    async def increment_votes(
        self, db: AsyncSession, comment_id: int, inc_votes: int
    ) -> CommentResponse:
        """
        Add `inc_votes` (may be negative) to one comment's votes.

        Query:
            UPDATE comments SET votes = votes + :inc_votes
            WHERE comment_id = :comment_id RETURNING *

        Raises:
            NotFoundError: "No comment found for comment <id>"
            ValidationError: the new total does not fit the votes column
        """
        try:
            result = await db.execute(
                update(Comment)
                .where(Comment.comment_id == comment_id)
                .values(votes=Comment.votes + inc_votes)
                .returning(Comment)
            )
        except DataError as e:
            raise ValidationError(
                context={"comment_id": comment_id, "inc_votes": inc_votes},
            ) from e
        comment = result.scalar_one_or_none()

        if comment is None:
            raise NotFoundError.for_resource("comment", comment_id)

        return CommentResponse.model_validate(comment)


comment_service = CommentService()
