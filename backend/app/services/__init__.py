# Services package init
"""
Game Reviews Backend — Services (Query Layer)
===============================================

What:  One stateless service object per resource, each method running one
       or two parameterized statements on the caller's AsyncSession.

Service Inventory:
    - CategoryService: list_categories
    - ReviewService:   list_reviews, get_review, ensure_exists
    - CommentService:  list_comments_for_review, create_comment, increment_votes
    - UserService:     list_users

Services raise ValidationError/NotFoundError for expected outcomes and let
everything else propagate. They never log and never commit; the session
dependency owns the transaction.
"""
