from __future__ import annotations

from typing import Any, Dict, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from .errors import ValidationError


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "Buy milk",
            }
        }
    )

    text: StrictStr = Field(..., description="Todo text; surrounding whitespace is trimmed")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """
        Strip whitespace and reject text that is left empty.
        """
        s = v.strip()
        if not s:
            raise ValueError("text must not be empty")
        return s


# PUBLIC_INTERFACE
class TodoCompletionUpdate(BaseModel):
    """
    Schema for toggling the completion flag, the only mutable field.
    Only JSON true/false are accepted; 0/1, strings and null are rejected.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "completed": True,
            }
        }
    )

    completed: StrictBool = Field(..., description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0b6f3c52-8a4e-4c67-9d1e-2f1f0c7f6d3a",
                "text": "Buy milk",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456Z",
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    text: str = Field(..., description="Todo text")
    completed: bool = Field(..., description="Completion status flag")
    created_at: str = Field(
        ..., alias="createdAt", description="Creation timestamp (ISO8601, UTC)"
    )


def _describe(error: Dict[str, Any]) -> str:
    # Drop the "body" prefix and the character offsets of JSON decode errors.
    loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
    message = str(error.get("msg", "invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{'.'.join(loc)}: {message}" if loc else message


# PUBLIC_INTERFACE
def validation_error_from(errors: Sequence[Dict[str, Any]]) -> ValidationError:
    """
    Condense pydantic/FastAPI error details into a single ValidationError whose
    message is safe to send back as a plain-text reason.

    Example:
        [{"loc": ("body", "text"), "msg": "Value error, text must not be empty"}]
        -> ValidationError("Invalid request: text: text must not be empty")
    """
    if not errors:
        return ValidationError("Invalid request")
    return ValidationError("Invalid request: " + "; ".join(_describe(e) for e in errors))
