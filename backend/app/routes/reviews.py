"""
Game Reviews Backend — Review Route Handlers
==============================================

What:  Review listing/detail and the per-review comment collection.
How:   Extracts path/body parameters, delegates to ReviewService or
       CommentService, wraps results in their envelopes.

Identifier validation:
    review_id is declared as an int within the serial range. Anything else
    ("notAnId", "1.5", 2**40) fails request validation before a query runs
    and the global handler answers 400 {"msg": "Bad request"}.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.comment import CommentCreate, CommentEnvelope, CommentListResponse
from app.schemas.common import MAX_SERIAL_ID, ErrorResponse
from app.schemas.review import ReviewEnvelope, ReviewListResponse
from app.services.comment_service import comment_service
from app.services.review_service import review_service

router = APIRouter(prefix="/api", tags=["Reviews"])

ReviewId = Annotated[
    int,
    Path(ge=-MAX_SERIAL_ID - 1, le=MAX_SERIAL_ID, description="Integer review identifier"),
]


@router.get(
    "/reviews",
    response_model=ReviewListResponse,
    summary="List reviews, newest first",
    description="Every review with its comment_count, sorted by created_at descending.",
)
async def get_reviews(
    db: AsyncSession = Depends(get_db_session),
) -> ReviewListResponse:
    reviews = await review_service.list_reviews(db)
    return ReviewListResponse(reviews=reviews)


@router.get(
    "/reviews/{review_id}",
    response_model=ReviewEnvelope,
    responses={
        400: {"description": "review_id is not an integer", "model": ErrorResponse},
        404: {"description": "No such review", "model": ErrorResponse},
    },
    summary="Get a single review",
)
async def get_review(
    review_id: ReviewId,
    db: AsyncSession = Depends(get_db_session),
) -> ReviewEnvelope:
    review = await review_service.get_review(db, review_id)
    return ReviewEnvelope(review=review)


@router.get(
    "/reviews/{review_id}/comments",
    response_model=CommentListResponse,
    responses={
        400: {"description": "review_id is not an integer", "model": ErrorResponse},
        404: {"description": "No such review", "model": ErrorResponse},
    },
    summary="List a review's comments, newest first",
)
async def get_review_comments(
    review_id: ReviewId,
    db: AsyncSession = Depends(get_db_session),
) -> CommentListResponse:
    comments = await comment_service.list_comments_for_review(db, review_id)
    return CommentListResponse(comments=comments)


@router.post(
    "/reviews/{review_id}/comments",
    status_code=201,
    response_model=CommentEnvelope,
    responses={
        400: {"description": "Malformed review_id or incomplete body", "model": ErrorResponse},
        404: {"description": "Unknown username or review", "model": ErrorResponse},
    },
    summary="Post a comment on a review",
    description=(
        "Body must contain `username` and `body`. Other properties, including "
        "`votes`, are ignored; a new comment always starts with 0 votes."
    ),
)
async def post_review_comment(
    review_id: ReviewId,
    payload: Optional[CommentCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> CommentEnvelope:
    payload = payload or CommentCreate()
    comment = await comment_service.create_comment(
        db,
        review_id=review_id,
        username=payload.username,
        body=payload.body,
    )
    return CommentEnvelope(comment=comment)
