"""
User API schemas.

Pydantic models for signup and login request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from snippetbox.core.security import MAX_PASSWORD_BYTES


class UserCreate(BaseModel):
    """Schema for user registration."""
    name: str = Field(..., max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("This field cannot be blank")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserIdResponse(BaseModel):
    """Id of a newly registered or authenticated user."""
    id: int
