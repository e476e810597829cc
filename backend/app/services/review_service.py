"""
Game Reviews Backend — Review Service
=======================================

What:  Review listing (with comment counts) and single-review lookup.
Who:   Called by the review routes and by CommentService (existence check).

Error Handling Strategy:
    Expected outcomes become NotFoundError; every other exception (driver
    errors, lost connections) propagates unchanged to the global handlers.
    This layer does not log.
"""

from typing import List

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.comment import Comment
from app.models.review import Review
from app.schemas.review import ReviewBase, ReviewListItem, ReviewResponse


class ReviewService:
    """Stateless query object for reviews."""

    async def list_reviews(self, db: AsyncSession) -> List[ReviewListItem]:
        """
        All reviews, newest first, each with its comment_count.

        Query plan:
            SELECT reviews.*, COUNT(comments.comment_id) AS comment_count
            FROM reviews LEFT OUTER JOIN comments
              ON comments.review_id = reviews.review_id
            GROUP BY reviews.review_id
            ORDER BY reviews.created_at DESC

        The outer join keeps reviews without comments; COUNT over the
        comment key (not *) gives them 0 rather than 1.
        """
        comment_count = func.count(Comment.comment_id).label("comment_count")
        stmt = (
            select(Review, comment_count)
            .outerjoin(Comment, Comment.review_id == Review.review_id)
            .group_by(Review.review_id)
            .order_by(desc(Review.created_at))
        )
        result = await db.execute(stmt)

        return [
            ReviewListItem(
                **ReviewBase.model_validate(review).model_dump(),
                comment_count=int(count or 0),
            )
            for review, count in result.all()
        ]

    async def get_review(self, db: AsyncSession, review_id: int) -> ReviewResponse:
        """
        Retrieve a single review by id.

        Raises:
            NotFoundError: "No review found for review <id>"
        """
        result = await db.execute(
            select(Review).where(Review.review_id == review_id)
        )
        review = result.scalar_one_or_none()

        if review is None:
            raise NotFoundError.for_resource("review", review_id)

        return ReviewResponse.model_validate(review)

    async def ensure_exists(self, db: AsyncSession, review_id: int) -> None:
        """Raises the review NotFoundError unless review_id has a row."""
        result = await db.execute(
            select(Review.review_id).where(Review.review_id == review_id)
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundError.for_resource("review", review_id)


review_service = ReviewService()
