"""
Game Reviews Backend — Application Package Initializer
========================================================

What: The board-game review catalogue API.

Architecture Note:
    ┌─────────────────────────────────────┐
    │       Routes (Handler Layer)        │  ← HTTP: params, envelopes, status
    ├─────────────────────────────────────┤
    │       Services (Query Layer)        │  ← one or two SQL statements each
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │       Database (Persistence)        │  ← shared async engine + pool
    └─────────────────────────────────────┘

    Errors travel upward as exceptions; main.py is the only place that
    turns them into HTTP responses.
"""

__version__ = "1.0.0"
