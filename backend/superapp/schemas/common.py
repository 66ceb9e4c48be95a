"""
SuperApp Backend — Shared Schema Building Blocks
==================================================

What:  Base class for every typed mutation input, plus small response models
       shared by all modules.
How:   `FormInput` runs a `before` model validator that
       1. drops blank strings so field defaults apply ("" means "not given"),
       2. checks `required_fields` and raises the field's own message.
       FastAPI turns the resulting validation error into a 400 through the
       RequestValidationError handler in main.py.
Who:   Subclassed by every schema in this package that a route accepts as a body.

Example:
    class ContactInput(FormInput):
        required_fields: ClassVar[Dict[str, str]] = {"first_name": "First name is required"}
        first_name: str

    ContactInput(first_name="  ")   # → ValidationError: "First name is required"
"""

import uuid
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError


def parse_tag_list(value: Any) -> List[str]:
    """
    Normalize tags given as "a, B ,c" or ["a", "B"] into ["a", "b", "c"].

    Blank entries are dropped; every tag is trimmed and lower-cased.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(tag).strip().lower() for tag in value if str(tag).strip()]


def parse_number(value: Any, message: str) -> Any:
    """Coerce numeric strings to float, raising `message` when that is impossible."""
    if value is None or isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise PydanticCustomError("number_required", message)


class FormInput(BaseModel):
    """Base for typed mutation inputs."""

    # field name → message returned when the field is missing or blank
    required_fields: ClassVar[Dict[str, str]] = {}

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_blank_and_check_required(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {
            key: value
            for key, value in data.items()
            if not (isinstance(value, str) and not value.strip())
        }
        for field, message in cls.required_fields.items():
            if cleaned.get(field) is None:
                raise PydanticCustomError("required", message)
        return cleaned

    def values(self) -> Dict[str, Any]:
        """Column values for an insert/update statement."""
        return self.model_dump()


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CreatedResponse(BaseModel):
    """Returned by every create endpoint."""
    id: uuid.UUID = Field(description="Identifier of the new record")


class ErrorResponse(BaseModel):
    """
    Standardized error body returned by the global exception handlers.

    Example:
        {
            "error": "validation_error",
            "message": "Title is required",
            "details": {"field": "title"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Dict[str, Any]] = Field(default=None)
    request_id: Optional[str] = Field(default=None)


class HealthResponse(BaseModel):
    """
    What:  Service health status for monitoring and load balancers.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="healthy, degraded, or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    gemini: str = Field(description="available or unavailable")
    uptime_seconds: float = Field(description="Seconds since service start")
