"""
Game Reviews Backend — Review Schemas
=======================================

What:  Review detail, list item and their envelopes.

ReviewListItem omits review_body (list views only show the card data) and
adds comment_count, which is aggregated at query time.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ReviewBase(BaseModel):
    """Fields shared by the list and detail representations."""
    review_id: int = Field(description="Unique review identifier")
    title: str = Field(description="Name of the reviewed game")
    category: str = Field(description="Slug of the game's category")
    designer: Optional[str] = Field(default=None, description="Game designer")
    owner: str = Field(description="Username of the reviewer")
    review_img_url: Optional[str] = Field(default=None, description="Cover image URL")
    created_at: datetime = Field(description="When the review was posted (ISO 8601)")
    votes: int = Field(description="Net votes, may be negative")

    model_config = {"from_attributes": True}


class ReviewResponse(ReviewBase):
    """Full review, returned by GET /api/reviews/{review_id}."""
    review_body: str = Field(description="The review text")


class ReviewListItem(ReviewBase):
    """Review card for GET /api/reviews."""
    comment_count: int = Field(description="Number of comments on this review")


class ReviewEnvelope(BaseModel):
    review: ReviewResponse


class ReviewListResponse(BaseModel):
    """Reviews sorted by created_at, newest first."""
    reviews: List[ReviewListItem]
