"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.user import User
from app.models.vehicle import Vehicle

__all__ = ["Base", "User", "Vehicle"]
