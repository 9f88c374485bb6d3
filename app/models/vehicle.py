"""ORM model for rentable vehicles."""

import uuid

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship

from app.models.base import Base


class Vehicle(Base):
    """Rentable vehicle owned by a user. vin is globally unique."""

    __tablename__ = "vehicles"
    __table_args__ = (
        CheckConstraint("rental_price > 0", name="ck_vehicles_rental_price_positive"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    make = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    vin = Column(String(20), nullable=False, unique=True, index=True)
    rental_price = Column(Numeric(10, 2, asdecimal=False), nullable=False, index=True)
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", back_populates="vehicles")
