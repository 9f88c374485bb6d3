"""Password hashing and JWT issuance/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.errors import InvalidToken

if TYPE_CHECKING:
    from app.core.config import Settings

# Bcrypt cost (rounds); matches BCRYPT_ROUNDS default.
BCRYPT_ROUNDS = 10

# Min/max lengths for registration input validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 30
PASSWORD_MIN_LEN = 6
PASSWORD_UPDATE_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if not isinstance(plain_password, str):
        raise TypeError(
            f"password must be a str, got {type(plain_password).__name__}"
        )
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    if not plain_password or not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenIssueError(ValueError):
    """Raised when a token is requested for a user object missing required fields."""


class TokenIssuer:
    """
    Signs and verifies access and refresh tokens.

    Access tokens carry sub (user id), role and email; refresh tokens carry sub only.
    Both carry a type claim so one kind cannot be presented as the other, and a
    random jti so two tokens issued in the same second still differ.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
        refresh_secret: str | None = None,
    ) -> None:
        if not secret:
            raise ValueError("secret must be non-empty")
        self._secret = secret
        self._refresh_secret = refresh_secret or secret
        self.algorithm = algorithm
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenIssuer":
        refresh_secret = (
            settings.JWT_REFRESH_SECRET.get_secret_value()
            if settings.JWT_REFRESH_SECRET is not None
            else None
        )
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
            refresh_secret=refresh_secret,
        )

    def _sign(self, claims: dict[str, Any], ttl: timedelta, secret: str) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            **claims,
            "iat": now,
            "exp": now + ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def issue_access_token(self, user: Any) -> str:
        """Create a short-lived access token for user (needs id and role)."""
        user_id = getattr(user, "id", None)
        role = getattr(user, "role", None)
        if not user_id or not role:
            raise TokenIssueError("User object must contain id and role")
        claims = {
            "sub": str(user_id),
            "role": role,
            "type": ACCESS_TOKEN_TYPE,
        }
        email = getattr(user, "email", None)
        if email:
            claims["email"] = email
        return self._sign(claims, self.access_ttl, self._secret)

    def issue_refresh_token(self, user: Any) -> str:
        """Create a long-lived refresh token for user (needs id)."""
        user_id = getattr(user, "id", None)
        if not user_id:
            raise TokenIssueError("User object must contain id")
        claims = {"sub": str(user_id), "type": REFRESH_TOKEN_TYPE}
        return self._sign(claims, self.refresh_ttl, self._refresh_secret)

    def verify(self, token: str, token_type: str = ACCESS_TOKEN_TYPE) -> dict[str, Any]:
        """
        Decode and validate a token; return its claims (sub, role, type, exp, iat, jti).
        Raises InvalidToken on any failure without saying which check failed.
        """
        secret = self._refresh_secret if token_type == REFRESH_TOKEN_TYPE else self._secret
        if not token or not isinstance(token, str):
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError:
            raise InvalidToken() from None
        if payload.get("type") != token_type or not payload.get("sub"):
            raise InvalidToken()
        return payload
