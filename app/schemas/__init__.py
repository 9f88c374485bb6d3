"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AccessTokenResponse,
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.user import UserAdminUpdate, UserPublic, UserSelfUpdate
from app.schemas.vehicle import VehicleCreate, VehicleRead, VehicleUpdate

__all__ = [
    "AccessTokenResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RefreshRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenResponse",
    "UserAdminUpdate",
    "UserPublic",
    "UserSelfUpdate",
    "VehicleCreate",
    "VehicleRead",
    "VehicleUpdate",
]
