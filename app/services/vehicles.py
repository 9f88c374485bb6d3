"""Vehicle CRUD plus lookup by VIN and filtering by maximum rental price."""

import logging
import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import Conflict, NotFound
from app.models import Vehicle

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"make", "model", "year", "vin", "rental_price"})


def _ensure_vin_free(db: Session, vin: str, vehicle_id: uuid.UUID | None = None) -> None:
    existing = db.query(Vehicle).filter(Vehicle.vin == vin).first()
    if existing is not None and existing.id != vehicle_id:
        raise Conflict("VIN already registered")


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e, "vehicles", "vin"):
            raise Conflict("VIN already registered") from e
        raise


def create_vehicle(db: Session, data: dict[str, Any], owner_id: uuid.UUID) -> Vehicle:
    """Persist a new vehicle owned by owner_id. Raises Conflict on a duplicate VIN."""
    _ensure_vin_free(db, data["vin"])
    vehicle = Vehicle(
        make=data["make"],
        model=data["model"],
        year=data["year"],
        vin=data["vin"],
        rental_price=data["rental_price"],
        owner_id=owner_id,
    )
    db.add(vehicle)
    _commit(db)
    db.refresh(vehicle)
    logger.info("Vehicle created: id=%s owner_id=%s", vehicle.id, owner_id)
    return vehicle


def get_vehicle(db: Session, vehicle_id: uuid.UUID) -> Vehicle:
    vehicle = db.get(Vehicle, vehicle_id)
    if vehicle is None:
        raise NotFound("Vehicle not found")
    return vehicle


def list_vehicles(db: Session) -> list[Vehicle]:
    return db.query(Vehicle).order_by(Vehicle.created_at, Vehicle.vin).all()


def update_vehicle(db: Session, vehicle_id: uuid.UUID, changes: dict[str, Any]) -> Vehicle:
    """Apply a partial update. Raises NotFound for unknown ids, Conflict on a taken VIN."""
    vehicle = get_vehicle(db, vehicle_id)
    changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
    if "vin" in changes:
        _ensure_vin_free(db, changes["vin"], vehicle_id=vehicle.id)
    for field, value in changes.items():
        setattr(vehicle, field, value)
    _commit(db)
    db.refresh(vehicle)
    logger.info("Vehicle updated: id=%s fields=%s", vehicle.id, sorted(changes))
    return vehicle


def delete_vehicle(db: Session, vehicle_id: uuid.UUID) -> None:
    """Delete permanently. Raises NotFound for unknown ids."""
    vehicle = get_vehicle(db, vehicle_id)
    db.delete(vehicle)
    db.commit()
    logger.info("Vehicle deleted: id=%s", vehicle_id)


def get_vehicle_by_vin(db: Session, vin: str) -> Vehicle:
    vehicle = db.query(Vehicle).filter(Vehicle.vin == vin).first()
    if vehicle is None:
        raise NotFound("Vehicle not found")
    return vehicle


def get_vehicles_by_max_price(db: Session, max_price: float) -> list[Vehicle]:
    """Return every vehicle whose rental price is at most max_price, cheapest first."""
    return (
        db.query(Vehicle)
        .filter(Vehicle.rental_price <= max_price)
        .order_by(Vehicle.rental_price, Vehicle.vin)
        .all()
    )
