"""Auth endpoints: register, login, refresh and logout."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_token_issuer
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import Forbidden
from app.core.security import TokenIssuer
from app.models.user import ROLE_ADMIN
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
from app.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RegisterResponse:
    """
    Create an account. The email must not already be registered.
    Self-registration as admin is refused with 403 when ALLOW_ADMIN_REGISTRATION is off.
    """
    if body.role == ROLE_ADMIN and not settings.ALLOW_ADMIN_REGISTRATION:
        raise Forbidden("Admin registration is disabled")
    user = auth_service.register(
        db,
        username=body.username,
        email=body.email,
        password=body.password,
        role=body.role,
        rounds=settings.BCRYPT_ROUNDS,
    )
    return RegisterResponse(user=user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns an access token and a refresh token.
    Include the access token in the Authorization header as: Bearer <accessToken>
    """
    return auth_service.login(db, body.email, body.password, issuer)


@router.post("/refresh", response_model=AccessTokenResponse)
def refresh(
    body: RefreshRequest,
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccessTokenResponse:
    """Exchange the current refresh token for a new access token."""
    return auth_service.refresh(db, body.refresh_token, issuer)


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """End the session: the stored refresh token is cleared."""
    auth_service.logout(db, current_user.id)
    return MessageResponse(message="Logout successful")
