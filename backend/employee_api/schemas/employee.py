"""
Employee Directory — Pydantic Request/Response Schemas
=======================================================

What:  The API contract for the employee endpoints.
Why:   Request bodies are validated before they reach the service, and
       responses expose exactly the fields listed here.

Schemas are separate from the SQLAlchemy model so the table can change
without changing the JSON clients see.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """
    Body of POST /api/employees.

    Example:
        {"name": "bob", "email": "bob@example.com"}
    """
    name: str = Field(min_length=1, max_length=255, description="Employee display name")
    email: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Optional contact email; must be unique across employees",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Rejects names that are empty once surrounding whitespace is removed."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        # Lower-cased so the uniqueness check is case-insensitive
        if v is None:
            return None
        normalized = v.strip().lower()
        if "@" not in normalized:
            raise ValueError("email must contain '@'")
        return normalized


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    A persisted employee as returned by every employee endpoint.

    GET /api/employees returns a JSON array of these in insertion order.
    """
    id: int = Field(description="Store-assigned identifier")
    name: str = Field(description="Employee display name")
    email: Optional[str] = Field(default=None, description="Contact email, if any")
    created_at: datetime = Field(description="When the record was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "employee '42' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
