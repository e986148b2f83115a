"""Pydantic schemas for registration, login and profile updates."""
from pydantic import BaseModel, Field


class RegisterSchema(BaseModel):
    # all optional: missing fields are reported as 400 by the service, not 422
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginSchema(BaseModel):
    email: str | None = None
    password: str | None = None


class ProfileUpdateSchema(BaseModel):
    user_id: int | None = Field(default=None, alias="userId")
    name: str | None = None
    password: str | None = None

    class Config:
        populate_by_name = True


class AccountOutSchema(BaseModel):
    """Public view of an account: never includes the password hash."""

    id: int
    name: str
    email: str
    role: str
    progress: int = 0
    completed_lessons: list[int] = Field(default_factory=list, alias="completedLessons")
    bookmarks: list[int] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class AuthResponseSchema(BaseModel):
    success: bool = True
    user: AccountOutSchema
