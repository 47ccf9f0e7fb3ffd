"""Vehicle API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db import get_db, is_unique_violation
from models.vehicle_type import VehicleType
from repositories.apartment_repository import get_apartment
from repositories.vehicle_repository import (
    create_vehicle as repo_create_vehicle,
    delete_vehicle as repo_delete_vehicle,
    get_vehicle_by_id as repo_get_vehicle_by_id,
    get_vehicle_by_license as repo_get_vehicle_by_license,
    list_vehicles as repo_list_vehicles,
    list_vehicles_by_apartment as repo_list_vehicles_by_apartment,
)
from schemas.vehicles import VehicleCreate, VehicleView
from utils.vehicle_view import vehicle_to_view

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["vehicles"])


@router.get("/vehicles", response_model=list[VehicleView])
def list_vehicles(
    vehicle_type: Optional[VehicleType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
) -> list[VehicleView]:
    """List all registered vehicles, optionally filtered by type (e.g. ?type=CAR)."""
    return [vehicle_to_view(v) for v in repo_list_vehicles(db, vehicle_type)]


@router.get("/vehicles/{vehicle_id}", response_model=VehicleView)
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)) -> VehicleView:
    """Get one vehicle by id."""
    vehicle = repo_get_vehicle_by_id(db, vehicle_id)
    if vehicle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    return vehicle_to_view(vehicle)


@router.get("/apartments/{apartment_id}/vehicles", response_model=list[VehicleView])
def list_apartment_vehicles(apartment_id: int, db: Session = Depends(get_db)) -> list[VehicleView]:
    """List all vehicles registered to an apartment."""
    if get_apartment(db, apartment_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Apartment not found")
    return [vehicle_to_view(v) for v in repo_list_vehicles_by_apartment(db, apartment_id)]


@router.post(
    "/apartments/{apartment_id}/vehicles",
    response_model=VehicleView,
    status_code=status.HTTP_201_CREATED,
)
def create_vehicle(
    apartment_id: int,
    body: VehicleCreate,
    db: Session = Depends(get_db),
) -> VehicleView:
    """Register a vehicle to an apartment. License plates are unique across apartments."""
    if get_apartment(db, apartment_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Apartment not found")
    if not body.license.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="License must not be blank",
        )
    if repo_get_vehicle_by_license(db, body.license) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Vehicle with license '{body.license}' already exists",
        )
    try:
        vehicle = repo_create_vehicle(
            db,
            apartment_id=apartment_id,
            license=body.license,
            vehicle_type=body.type,
        )
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e, "license"):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Vehicle with license '{body.license}' already exists",
            ) from e
        raise
    LOG.info("Vehicle registered: id=%s license=%s apartment=%s", vehicle.id, vehicle.license, apartment_id)
    return vehicle_to_view(vehicle)


@router.delete(
    "/apartments/{apartment_id}/vehicles/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_vehicle(
    apartment_id: int,
    vehicle_id: int,
    db: Session = Depends(get_db),
) -> None:
    """Delete a vehicle by id. Vehicle must belong to the given apartment."""
    if get_apartment(db, apartment_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Apartment not found")
    vehicle = repo_get_vehicle_by_id(db, vehicle_id)
    if vehicle is None or vehicle.apartment_id != apartment_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    repo_delete_vehicle(db, vehicle_id)
    LOG.info("Vehicle removed: id=%s apartment=%s", vehicle_id, apartment_id)
    return None
