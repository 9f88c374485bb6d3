"""Request dependencies: DB session, token issuer, authentication and role gate."""

import uuid
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import Forbidden, InvalidToken, Unauthenticated
from app.core.security import ACCESS_TOKEN_TYPE, TokenIssuer
from app.models import User
from app.models.user import ROLE_ADMIN
from app.schemas.auth import CurrentUser

security = HTTPBearer(auto_error=False)


def get_token_issuer(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenIssuer:
    """Token issuer configured from the process settings."""
    return TokenIssuer.from_settings(settings)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """
    Require a valid Bearer access token and return the caller's identity (id, role, email).
    Raises Unauthenticated (401) when the header is missing or malformed, the token
    does not verify, or the user no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Missing or invalid token")
    claims = issuer.verify(credentials.credentials, token_type=ACCESS_TOKEN_TYPE)
    try:
        user_id = uuid.UUID(claims["sub"])
    except (TypeError, ValueError):
        raise InvalidToken() from None
    user = db.get(User, user_id)
    if user is None:
        raise Unauthenticated("User not found")
    return CurrentUser(id=user.id, role=user.role, email=user.email)


def require_roles(*roles: str) -> Callable[[CurrentUser], CurrentUser]:
    """Build a dependency that lets through only identities whose role is in roles."""
    allowed = frozenset(roles)

    def role_gate(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed:
            raise Forbidden("Access forbidden")
        return current_user

    return role_gate


require_admin = require_roles(ROLE_ADMIN)
