"""
Game Reviews Backend — Category Service
=========================================

What:  Read access to the `categories` reference table.
Who:   Called by GET /api/categories.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.schemas.category import CategoryResponse


class CategoryService:
    """Stateless query object for categories."""

    async def list_categories(self, db: AsyncSession) -> List[CategoryResponse]:
        """Returns every category. Order is not significant; empty is valid."""
        result = await db.execute(select(Category))
        return [CategoryResponse.model_validate(c) for c in result.scalars().all()]


category_service = CategoryService()
