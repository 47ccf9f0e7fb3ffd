"""Project a Vehicle row into the flat VehicleView returned by the API."""
from __future__ import annotations

from typing import TYPE_CHECKING

from schemas.vehicles import VehicleView

if TYPE_CHECKING:
    from models.vehicle import Vehicle


class UnresolvedReferenceError(ValueError):
    """Vehicle is missing its type or apartment, so it cannot be projected."""

    def __init__(self, vehicle_id: int | None, field: str):
        self.vehicle_id = vehicle_id
        self.field = field
        super().__init__(f"Vehicle {vehicle_id} has unresolved {field}")


def vehicle_to_view(vehicle: Vehicle) -> VehicleView:
    """
    Build a VehicleView from a vehicle whose apartment is already loaded.
    id and license are copied as-is; type is the enum member name, apartment the apartment's name.
    Raises UnresolvedReferenceError if vehicle_type, apartment or apartment.name is None.
    """
    vehicle_type = vehicle.vehicle_type
    if vehicle_type is None:
        raise UnresolvedReferenceError(vehicle.id, "vehicle_type")
    apartment = vehicle.apartment
    if apartment is None:
        raise UnresolvedReferenceError(vehicle.id, "apartment")
    if apartment.name is None:
        raise UnresolvedReferenceError(vehicle.id, "apartment.name")
    return VehicleView(
        id=vehicle.id,
        license=vehicle.license,
        type=vehicle_type.name,
        apartment=apartment.name,
    )
