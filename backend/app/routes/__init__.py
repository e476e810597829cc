# Routes package init
"""
Game Reviews Backend — API Routes Package
===========================================

What:  HTTP route handlers (the handler layer).
How:   One module per resource, each exposing an APIRouter.

Route Inventory:
    - categories.py: GET   /api/categories
    - reviews.py:    GET   /api/reviews
                     GET   /api/reviews/{review_id}
                     GET   /api/reviews/{review_id}/comments
                     POST  /api/reviews/{review_id}/comments
    - comments.py:   PATCH /api/comments/{comment_id}
    - users.py:      GET   /api/users
    - health.py:     GET   /health

Routes stay THIN: extract parameters, call a service, wrap the result in
its named envelope. Failures are raised, never formatted here; the global
exception handlers in main.py produce every error body.
"""
