"""Request/response schemas for vehicle endpoints."""

import uuid
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

VIN_PATTERN = r"^[A-Za-z0-9]+$"
VIN_MIN_LENGTH = 3
VIN_MAX_LENGTH = 20
MAKE_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
YEAR_MIN = 1886
YEAR_MAX = 2100
# Matches the Numeric(10, 2) rental_price column.
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class VehicleCreate(BaseModel):
    """New vehicle. The owner is the authenticated user, never taken from the body."""

    model_config = {"populate_by_name": True, "extra": "forbid"}

    make: str = Field(..., min_length=MAKE_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    model: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX)
    vin: str = Field(
        ...,
        min_length=VIN_MIN_LENGTH,
        max_length=VIN_MAX_LENGTH,
        pattern=VIN_PATTERN,
        description="Vehicle Identification Number (alphanumeric, unique)",
    )
    rental_price: Decimal = Field(
        ...,
        alias="rentalPrice",
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Rental price, at most two decimal places",
    )


class VehicleUpdate(BaseModel):
    """Partial vehicle update; omitted fields are left unchanged."""

    model_config = {"populate_by_name": True, "extra": "forbid"}

    make: str | None = Field(default=None, min_length=MAKE_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    model: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    year: int | None = Field(default=None, ge=YEAR_MIN, le=YEAR_MAX)
    vin: str | None = Field(
        default=None,
        min_length=VIN_MIN_LENGTH,
        max_length=VIN_MAX_LENGTH,
        pattern=VIN_PATTERN,
    )
    rental_price: Decimal | None = Field(
        default=None,
        alias="rentalPrice",
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )


class VehicleRead(BaseModel):
    """Vehicle as returned to clients."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    make: str
    model: str
    year: int
    vin: str
    rental_price: float = Field(
        ...,
        validation_alias=AliasChoices("rental_price", "rentalPrice"),
        serialization_alias="rentalPrice",
    )
    owner_id: uuid.UUID = Field(
        ...,
        validation_alias=AliasChoices("owner_id", "ownerId"),
        serialization_alias="ownerId",
    )
