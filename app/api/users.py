"""User profile endpoints: self-service under /me, admin-only by id."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.user import UserAdminUpdate, UserPublic, UserSelfUpdate
from app.services import users as user_service

router = APIRouter()


@router.get("/me", response_model=UserPublic)
def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    return UserPublic.model_validate(user_service.get_user_or_404(db, current_user.id))


@router.put("/me", response_model=UserPublic)
def update_me(
    body: UserSelfUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserPublic:
    """Update the caller's username, email or password. Role cannot be changed here."""
    user = user_service.update_user(
        db,
        current_user.id,
        body.model_dump(exclude_unset=True),
        rounds=settings.BCRYPT_ROUNDS,
    )
    return UserPublic.model_validate(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete the caller's account and every vehicle it owns."""
    user_service.delete_user(db, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[UserPublic])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserPublic]:
    """List all users (admin only)."""
    return [UserPublic.model_validate(u) for u in user_service.list_users(db)]


@router.get("/{user_id}", response_model=UserPublic)
def get_user(
    user_id: uuid.UUID,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    return UserPublic.model_validate(user_service.get_user_or_404(db, user_id))


@router.put("/{user_id}", response_model=UserPublic)
def update_user(
    user_id: uuid.UUID,
    body: UserAdminUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserPublic:
    user = user_service.update_user(
        db,
        user_id,
        body.model_dump(exclude_unset=True),
        rounds=settings.BCRYPT_ROUNDS,
    )
    return UserPublic.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: uuid.UUID,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
