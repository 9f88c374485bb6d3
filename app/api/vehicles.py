"""Vehicle endpoints. Every route requires an authenticated caller."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser, MessageResponse
from app.schemas.vehicle import VehicleCreate, VehicleRead, VehicleUpdate
from app.services import vehicles as vehicle_service

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/vehicle", response_model=VehicleRead, status_code=status.HTTP_201_CREATED)
def create_vehicle(
    body: VehicleCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Register a vehicle owned by the caller."""
    return vehicle_service.create_vehicle(db, body.model_dump(), owner_id=current_user.id)


@router.get("/vehicles", response_model=list[VehicleRead])
def list_vehicles(db: Annotated[Session, Depends(get_db)]):
    return vehicle_service.list_vehicles(db)


@router.get("/vehicle/search/{vin}", response_model=VehicleRead)
def search_vehicle_by_vin(vin: str, db: Annotated[Session, Depends(get_db)]):
    """Exact lookup by VIN."""
    return vehicle_service.get_vehicle_by_vin(db, vin)


@router.get("/price/{max_price}", response_model=list[VehicleRead])
def get_vehicles_by_max_price(
    max_price: Annotated[float, Path(ge=0, description="Inclusive upper bound on rental price")],
    db: Annotated[Session, Depends(get_db)],
):
    """All vehicles with a rental price at most max_price, cheapest first."""
    return vehicle_service.get_vehicles_by_max_price(db, max_price)


@router.get("/vehicle/{vehicle_id}", response_model=VehicleRead)
def get_vehicle(vehicle_id: uuid.UUID, db: Annotated[Session, Depends(get_db)]):
    return vehicle_service.get_vehicle(db, vehicle_id)


@router.put("/vehicle/{vehicle_id}", response_model=VehicleRead)
def update_vehicle(
    vehicle_id: uuid.UUID,
    body: VehicleUpdate,
    db: Annotated[Session, Depends(get_db)],
):
    return vehicle_service.update_vehicle(db, vehicle_id, body.model_dump(exclude_unset=True))


@router.delete("/vehicle/{vehicle_id}", response_model=MessageResponse)
def delete_vehicle(vehicle_id: uuid.UUID, db: Annotated[Session, Depends(get_db)]) -> MessageResponse:
    vehicle_service.delete_vehicle(db, vehicle_id)
    return MessageResponse(message="Vehicle deleted successfully")
