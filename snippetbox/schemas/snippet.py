"""
Snippet API schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from snippetbox.core.config import settings

# Expiry periods offered to users, in days
PERMITTED_EXPIRES_DAYS = (1, 7, 365)


class SnippetCreate(BaseModel):
    """Schema for creating a snippet."""
    title: str = Field(..., max_length=100)
    content: str
    expires: int = Field(default=settings.SNIPPET_DEFAULT_EXPIRES_DAYS, description="Lifetime in days")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("This field cannot be blank")
        return value

    @field_validator("expires")
    @classmethod
    def permitted_expiry(cls, value: int) -> int:
        if value not in PERMITTED_EXPIRES_DAYS:
            raise ValueError(f"This field must equal one of {', '.join(map(str, PERMITTED_EXPIRES_DAYS))}")
        return value


class SnippetResponse(BaseModel):
    """Schema for snippet data in API responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    created: datetime
    expires: datetime
