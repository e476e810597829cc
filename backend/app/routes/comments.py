"""
Comment route handlers.

Vote increments address a single comment by comment_id; the review a
comment belongs to plays no part in the update.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.comment import CommentEnvelope, CommentVoteUpdate
from app.schemas.common import MAX_SERIAL_ID, ErrorResponse
from app.services.comment_service import comment_service

router = APIRouter(prefix="/api", tags=["Comments"])

CommentId = Annotated[
    int,
    Path(ge=-MAX_SERIAL_ID - 1, le=MAX_SERIAL_ID, description="Integer comment identifier"),
]


@router.patch(
    "/comments/{comment_id}",
    response_model=CommentEnvelope,
    responses={
        400: {"description": "Malformed comment_id or inc_votes", "model": ErrorResponse},
        404: {"description": "No such comment", "model": ErrorResponse},
    },
    summary="Increment a comment's votes",
)
async def patch_comment_votes(
    comment_id: CommentId,
    payload: CommentVoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentEnvelope:
    comment = await comment_service.increment_votes(db, comment_id, payload.inc_votes)
    return CommentEnvelope(comment=comment)
