"""Credential store: lookup, update and deletion of user rows."""

import logging
import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import DuplicateEmail, NotFound
from app.core.security import BCRYPT_ROUNDS, hash_password
from app.models import User

logger = logging.getLogger(__name__)

# Fields a caller may change through update_user; anything else is ignored.
UPDATABLE_FIELDS = frozenset({"username", "email", "password", "role"})


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively; store them lowercased and trimmed."""
    return email.strip().lower()


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    """Return the user with user_id or raise NotFound."""
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at, User.email).all()


def update_user(
    db: Session,
    user_id: uuid.UUID,
    changes: dict[str, Any],
    rounds: int = BCRYPT_ROUNDS,
) -> User:
    """
    Apply changes to a user. A new password is hashed before storage; a new email
    must not belong to another user.
    """
    user = get_user_or_404(db, user_id)
    changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}

    if "email" in changes:
        email = normalize_email(changes["email"])
        other = get_user_by_email(db, email)
        if other is not None and other.id != user.id:
            raise DuplicateEmail()
        user.email = email
    if "password" in changes:
        user.password_hash = hash_password(changes["password"], rounds=rounds)
    if "username" in changes:
        user.username = changes["username"]
    if "role" in changes:
        user.role = changes["role"]

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e, "users", "email"):
            raise DuplicateEmail() from e
        raise
    db.refresh(user)
    logger.info("User updated: id=%s fields=%s", user.id, sorted(changes))
    return user


def delete_user(db: Session, user_id: uuid.UUID) -> None:
    """Delete a user and the vehicles they own. Raises NotFound for unknown ids."""
    user = get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User deleted: id=%s", user_id)
