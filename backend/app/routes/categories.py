"""Category route handlers."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.category import CategoryListResponse
from app.services.category_service import category_service

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List all game categories",
)
async def get_categories(
    db: AsyncSession = Depends(get_db_session),
) -> CategoryListResponse:
    categories = await category_service.list_categories(db)
    return CategoryListResponse(categories=categories)
