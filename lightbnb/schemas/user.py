"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name"
    )

    email: EmailStr = Field(
        ...,
        description="User email address"
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password hash produced by the caller"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Store emails lower-cased."""
        return v.lower()


class UserResponse(BaseModel):
    """User record without the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
