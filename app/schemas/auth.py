"""Request/response schemas for auth endpoints."""

import uuid

from pydantic import BaseModel, EmailStr, Field

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.user import RoleName, UserPublic


class RegisterRequest(BaseModel):
    """New account details. role defaults to 'user'."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Display name"
    )
    email: EmailStr = Field(..., description="Login email; unique across users")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    role: RoleName = Field(
        default="user",
        description="admin or user; admin is refused when ALLOW_ADMIN_REGISTRATION is off",
    )


class RegisterResponse(BaseModel):
    user: UserPublic


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class RefreshRequest(BaseModel):
    """Refresh token presented in exchange for a new access token."""

    model_config = {"populate_by_name": True}

    refresh_token: str = Field(..., alias="refreshToken", min_length=1)


class TokenResponse(BaseModel):
    """Access and refresh tokens returned after successful login."""

    model_config = {"populate_by_name": True}

    access_token: str = Field(..., alias="accessToken", description="JWT access token")
    refresh_token: str = Field(..., alias="refreshToken", description="JWT refresh token")
    token_type: str = Field(default="bearer", alias="tokenType", description="Token type")
    user: UserPublic


class AccessTokenResponse(BaseModel):
    """New access token returned by refresh."""

    model_config = {"populate_by_name": True}

    access_token: str = Field(..., alias="accessToken", description="JWT access token")
    token_type: str = Field(default="bearer", alias="tokenType", description="Token type")
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class CurrentUser(BaseModel):
    """Authenticated identity (id, role, email) attached to a request."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    role: str
    email: str
