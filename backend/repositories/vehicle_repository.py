"""Vehicle repository: list, get, create, delete.

Every read that feeds the API eager-loads Vehicle.apartment, so the
projection never touches a lazy relationship after the session is gone.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from models.apartment import Apartment  # noqa: F401 - resolves Vehicle.apartment
from models.vehicle import Vehicle, VehicleType


def normalize_license(license: str) -> str:
    """Plates are stored stripped and upper-cased: ' abc-123 ' -> 'ABC-123'."""
    return license.strip().upper()


def create_vehicle(
    session: Session,
    *,
    apartment_id: int,
    license: str,
    vehicle_type: VehicleType,
) -> Vehicle:
    """Create a vehicle for an apartment, commit, and return it with apartment loaded."""
    vehicle = Vehicle(
        apartment_id=apartment_id,
        license=normalize_license(license),
        vehicle_type=vehicle_type,
    )
    session.add(vehicle)
    session.commit()
    return get_vehicle_by_id(session, vehicle.id)


def get_vehicle_by_id(session: Session, vehicle_id: int) -> Optional[Vehicle]:
    """Return vehicle by id (apartment loaded) or None."""
    return session.execute(
        select(Vehicle)
        .where(Vehicle.id == vehicle_id)
        .options(selectinload(Vehicle.apartment))
    ).scalar_one_or_none()


def get_vehicle_by_license(session: Session, license: str) -> Optional[Vehicle]:
    """Return vehicle by license plate or None. Lookup is normalized like storage."""
    return session.execute(
        select(Vehicle)
        .where(Vehicle.license == normalize_license(license))
        .options(selectinload(Vehicle.apartment))
    ).scalar_one_or_none()


def list_vehicles(session: Session, vehicle_type: VehicleType | None = None) -> list[Vehicle]:
    """Return all vehicles ordered by license, optionally only one type."""
    stmt = select(Vehicle).options(selectinload(Vehicle.apartment)).order_by(Vehicle.license)
    if vehicle_type is not None:
        stmt = stmt.where(Vehicle.vehicle_type == vehicle_type)
    return list(session.execute(stmt).scalars().all())


def list_vehicles_by_apartment(session: Session, apartment_id: int) -> list[Vehicle]:
    """Return all vehicles for an apartment, ordered by license."""
    result = session.execute(
        select(Vehicle)
        .where(Vehicle.apartment_id == apartment_id)
        .order_by(Vehicle.license)
        .options(selectinload(Vehicle.apartment))
    )
    return list(result.scalars().all())


def delete_vehicle(session: Session, vehicle_id: int) -> bool:
    """Delete vehicle by id. Returns True if deleted, False if not found."""
    vehicle = session.get(Vehicle, vehicle_id)
    if vehicle is None:
        return False
    session.delete(vehicle)
    session.commit()
    return True
