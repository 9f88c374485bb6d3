"""
Session lifecycle for one user: register, login, refresh, logout.

A user moves Anonymous -> registered (logged out) -> active session on login,
stays active across any number of refreshes, and returns to logged out on logout.
At most one refresh token is active per user: a new login overwrites the stored
token (last writer wins), which invalidates any earlier refresh token.
"""

import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidRefreshToken,
    InvalidToken,
    Unauthenticated,
)
from app.core.security import (
    BCRYPT_ROUNDS,
    REFRESH_TOKEN_TYPE,
    TokenIssuer,
    hash_password,
    verify_password,
)
from app.models import User
from app.models.user import ROLE_USER
from app.schemas.auth import AccessTokenResponse, TokenResponse
from app.schemas.user import UserPublic
from app.services.users import get_user_by_email, normalize_email

logger = logging.getLogger(__name__)


def register(
    db: Session,
    username: str,
    email: str,
    password: str,
    role: str | None = None,
    rounds: int = BCRYPT_ROUNDS,
) -> UserPublic:
    """Create a user with a hashed password. Raises DuplicateEmail if the email is taken."""
    email = normalize_email(email)
    if get_user_by_email(db, email) is not None:
        raise DuplicateEmail()

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password, rounds=rounds),
        role=role or ROLE_USER,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e, "users", "email"):
            raise DuplicateEmail() from e
        raise
    db.refresh(user)
    logger.info("User registered: id=%s role=%s", user.id, user.role)
    return UserPublic.model_validate(user)


def login(db: Session, email: str, password: str, issuer: TokenIssuer) -> TokenResponse:
    """
    Verify credentials and open a session: issue access and refresh tokens and
    store the refresh token on the user, replacing any previous one.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    access_token = issuer.issue_access_token(user)
    refresh_token = issuer.issue_refresh_token(user)
    user.refresh_token = refresh_token
    db.commit()
    db.refresh(user)
    logger.info("User logged in: id=%s", user.id)
    return TokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        user=UserPublic.model_validate(user),
    )


def refresh(db: Session, refresh_token: str, issuer: TokenIssuer) -> AccessTokenResponse:
    """
    Exchange a refresh token for a new access token. The refresh token is not rotated.

    Fails with InvalidRefreshToken when the token does not verify, its user no longer
    exists, or it is not the token currently stored for that user (superseded by a
    later login or cleared by logout).
    """
    try:
        claims = issuer.verify(refresh_token, token_type=REFRESH_TOKEN_TYPE)
        user_id = uuid.UUID(claims["sub"])
    except (InvalidToken, ValueError):
        raise InvalidRefreshToken() from None

    user = db.get(User, user_id)
    if user is None or user.refresh_token is None or user.refresh_token != refresh_token:
        logger.info("Refresh rejected: user_id=%s", user_id)
        raise InvalidRefreshToken()

    return AccessTokenResponse(
        access_token=issuer.issue_access_token(user),
        user=UserPublic.model_validate(user),
    )


def logout(db: Session, user_id: uuid.UUID | None) -> None:
    """Clear the stored refresh token. Logging out twice is not an error."""
    if user_id is None:
        raise Unauthenticated()
    user = db.get(User, user_id)
    if user is None or user.refresh_token is None:
        return
    user.refresh_token = None
    db.commit()
    logger.info("User logged out: id=%s", user_id)
