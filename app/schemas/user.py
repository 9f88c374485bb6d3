"""Request/response schemas for user profile endpoints."""

import uuid
from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_UPDATE_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)

RoleName = Literal["admin", "user"]


class UserPublic(BaseModel):
    """User fields safe to return to clients (no password hash, no refresh token)."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    username: str
    email: str
    role: str


class UserSelfUpdate(BaseModel):
    """Fields a user may change on their own profile. Role is not among them."""

    model_config = {"extra": "forbid"}

    username: str | None = Field(
        default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN
    )
    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=PASSWORD_UPDATE_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )


class UserAdminUpdate(UserSelfUpdate):
    """Admin update of any user, including role."""

    role: RoleName | None = None
