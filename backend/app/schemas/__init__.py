"""
Game Reviews Backend — Pydantic Request/Response Schemas
==========================================================

What:  The API contract: response envelopes and request bodies.
How:   Route handlers declare these as response_model/body types; FastAPI
       serializes and documents them.

Every success body is a single named envelope (`categories`, `reviews`,
`review`, `comments`, `comment`, `users`); every error body is
ErrorResponse (`{"msg": ...}`).
"""
