"""
Game Reviews Backend — ORM Models
==================================

What:  SQLAlchemy mappings for the four tables of the review catalogue.
Why:   Importing this package registers every table on Base.metadata, so
       foreign keys between the tables can be resolved.
"""

from app.models.category import Category
from app.models.comment import Comment
from app.models.review import Review
from app.models.user import User

__all__ = ["Category", "Comment", "Review", "User"]
