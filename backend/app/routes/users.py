"""User route handlers."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.user import UserListResponse
from app.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users",
    response_model=UserListResponse,
    summary="List all users",
)
async def get_users(
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    users = await user_service.list_users(db)
    return UserListResponse(users=users)
