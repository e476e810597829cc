"""
Game Reviews Backend — Comment Schemas
========================================

What:  Comment response, creation/vote request bodies and envelopes.

CommentCreate accepts any JSON object: both fields are optional here so a
missing field reaches the service and gets the "incomplete information"
message instead of a generic request validation error. Unknown keys
(e.g. a client-supplied `votes`) are dropped.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import MAX_SERIAL_ID


class CommentResponse(BaseModel):
    comment_id: int = Field(description="Unique comment identifier")
    body: str = Field(description="Comment text")
    votes: int = Field(description="Net votes, starts at 0")
    author: str = Field(description="Username of the commenter")
    review_id: int = Field(description="Review this comment belongs to")
    created_at: datetime = Field(description="When the comment was posted (ISO 8601)")

    model_config = {"from_attributes": True}


class CommentCreate(BaseModel):
    """Body of POST /api/reviews/{review_id}/comments."""
    username: Optional[str] = Field(default=None, description="Existing username")
    body: Optional[str] = Field(default=None, description="Comment text")

    model_config = {"extra": "ignore"}


class CommentVoteUpdate(BaseModel):
    """Body of PATCH /api/comments/{comment_id}."""
    inc_votes: int = Field(
        ge=-MAX_SERIAL_ID - 1,
        le=MAX_SERIAL_ID,
        description="Signed amount to add to the comment's votes",
    )


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class CommentListResponse(BaseModel):
    """Comments sorted by created_at, newest first. Empty when there are none."""
    comments: List[CommentResponse]
