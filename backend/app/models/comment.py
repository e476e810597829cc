"""
Game Reviews Backend — Comment SQLAlchemy Model
=================================================

What:  ORM model representing the `comments` table.
Who:   Created and vote-incremented by CommentService.

Lifecycle:
    1. Inserted by POST /api/reviews/{review_id}/comments with votes = 0
    2. votes changed only by PATCH /api/comments/{comment_id}
    3. Never deleted through the API

Both foreign keys are enforced by the database; an insert naming an
unknown author or review fails with an IntegrityError, which the service
reports as "Not found".
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Comment(Base):
    """A user-authored remark attached to exactly one review."""

    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(
        Text, ForeignKey("users.username"), nullable=False
    )
    review_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reviews.review_id"), nullable=False
    )
    votes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Comment(comment_id={self.comment_id}, review_id={self.review_id}, "
            f"author='{self.author}')>"
        )
