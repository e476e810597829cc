"""Category model: reference data, keyed by slug."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Category(Base):
    """A board-game category such as 'euro game' or 'dexterity'."""

    __tablename__ = "categories"

    slug: Mapped[str] = mapped_column(Text, primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(slug='{self.slug}')>"
