"""
Game Reviews Backend — Shared Schemas
======================================

What:  Error body and health check schemas used across all routers.
"""

from pydantic import BaseModel, Field

# Upper bound of a PostgreSQL `serial` column
MAX_SERIAL_ID = 2_147_483_647


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing request.

    Example:
        {"msg": "No review found for review 100"}
    """
    msg: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
