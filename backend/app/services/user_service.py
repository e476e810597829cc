"""
Game Reviews Backend — User Service
=====================================

What:  Read access to the `users` reference table.
Who:   Called by GET /api/users.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.schemas.user import UserResponse


class UserService:
    """Stateless query object for users."""

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        """Returns every user. Order is not significant; empty is valid."""
        result = await db.execute(select(User))
        return [UserResponse.model_validate(u) for u in result.scalars().all()]


user_service = UserService()
