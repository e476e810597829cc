"""
Game Reviews Backend — Review SQLAlchemy Model
================================================

What:  ORM model representing the `reviews` table.
Who:   Read by ReviewService; referenced by Comment.review_id.

Table notes:
    - review_id: serial primary key
    - category / owner: foreign keys into the reference tables
    - votes: signed integer, may go negative
    - created_at: timezone-aware; listings sort on it newest first

comment_count is NOT a column. It is aggregated from `comments` whenever
reviews are listed.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Review(Base):
    """One board-game review."""

    __tablename__ = "reviews"

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        Text, ForeignKey("categories.slug"), nullable=False
    )
    designer: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner: Mapped[str] = mapped_column(
        Text, ForeignKey("users.username"), nullable=False
    )
    review_body: Mapped[str] = mapped_column(Text, nullable=False)
    review_img_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    votes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )

    def __repr__(self) -> str:
        return f"<Review(review_id={self.review_id}, title='{self.title}')>"
