"""Common Pydantic schemas."""

from typing import Any, ClassVar, List, Optional

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="Dotted path to the invalid field")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    code: Optional[str] = Field(None, description="Application-specific error code")
    retryable: Optional[bool] = Field(None, description="Whether the operation can be retried")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")


class UpdateRequest(BaseModel):
    """
    Base for partial-update bodies.

    Every field is optional and only the fields present in the request body
    are applied. An explicit ``null`` clears a field only when the field is
    listed in ``nullable_fields``; otherwise it is treated as absent.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Return attribute -> value for the fields the caller sent."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True, exclude=exclude).items()
            if value is not None or field in self.nullable_fields
        }
