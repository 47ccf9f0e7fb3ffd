"""Pydantic schemas for vehicle API."""
from pydantic import BaseModel, ConfigDict, Field

from models.vehicle_type import VehicleType


class VehicleCreate(BaseModel):
    """Payload for registering a vehicle to an apartment."""

    license: str = Field(..., min_length=1, max_length=32)
    type: VehicleType


class VehicleView(BaseModel):
    """Flat vehicle representation returned by the API.

    ``type`` is the enum token (``"CAR"``), ``apartment`` the apartment name.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    license: str
    type: str
    apartment: str
