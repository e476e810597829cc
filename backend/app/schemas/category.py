"""Category schemas."""

from typing import List

from pydantic import BaseModel, Field


class CategoryResponse(BaseModel):
    slug: str = Field(description="Unique category identifier")
    description: str = Field(description="What kind of games belong here")

    model_config = {"from_attributes": True}


class CategoryListResponse(BaseModel):
    """Returned by GET /api/categories."""
    categories: List[CategoryResponse]
