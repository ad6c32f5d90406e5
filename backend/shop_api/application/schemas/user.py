"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from .partial_update import PartialUpdate

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    """Schema for registering a new user.

    ``password`` is optional at the schema level; the facade refuses to
    create an account without one.
    """

    name: str = Field(..., min_length=1, max_length=255, examples=["Ann"])
    surname: str = Field(..., min_length=1, max_length=255, examples=["Lee"])
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, examples=["ann@x.io"])
    username: str = Field(..., min_length=1, max_length=255, examples=["ann"])
    password: str | None = Field(None, min_length=1, max_length=255)


class UserUpdate(PartialUpdate):
    """Schema for partially updating a user — only supplied fields are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    surname: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    username: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Schema returned to the client — never carries the password hash or API key."""

    id: int
    name: str
    surname: str
    fullname: str
    email: str
    username: str
    role: str
    state: int
    gravatar: str
    created_at: datetime
    updated_at: datetime | None
    last_logged_at: datetime | None

    model_config = {"from_attributes": True}
