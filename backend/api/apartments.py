"""Apartment API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db import get_db, is_unique_violation
from repositories.apartment_repository import count_vehicles_by_apartment
from repositories.apartment_repository import create_apartment as repo_create_apartment
from repositories.apartment_repository import delete_apartment as repo_delete_apartment
from repositories.apartment_repository import get_apartment_by_name as repo_get_apartment_by_name
from repositories.apartment_repository import list_apartments as repo_list_apartments
from schemas.apartments import ApartmentCreate, ApartmentResponse

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/apartments", tags=["apartments"])


def _apartment_to_response(db: Session, apartment) -> ApartmentResponse:
    """Build ApartmentResponse from model instance."""
    return ApartmentResponse(
        id=apartment.id,
        name=apartment.name,
        floor=apartment.floor,
        vehicle_count=count_vehicles_by_apartment(db, apartment.id),
    )


@router.get("", response_model=list[ApartmentResponse])
def list_apartments(db: Session = Depends(get_db)) -> list[ApartmentResponse]:
    """List all apartments."""
    return [_apartment_to_response(db, a) for a in repo_list_apartments(db)]


@router.post("", response_model=ApartmentResponse, status_code=status.HTTP_201_CREATED)
def create_apartment(
    body: ApartmentCreate,
    db: Session = Depends(get_db),
) -> ApartmentResponse:
    """Create a new apartment. Names are unique."""
    if repo_get_apartment_by_name(db, body.name) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Apartment '{body.name}' already exists",
        )
    try:
        apartment = repo_create_apartment(db, name=body.name, floor=body.floor)
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e, "name"):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Apartment '{body.name}' already exists",
            ) from e
        raise
    LOG.info("Apartment created: id=%s name=%s", apartment.id, apartment.name)
    return _apartment_to_response(db, apartment)


@router.delete("/{apartment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_apartment(apartment_id: int, db: Session = Depends(get_db)) -> None:
    """Delete an apartment by id. Its vehicles are removed with it."""
    if not repo_delete_apartment(db, apartment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Apartment not found")
    LOG.info("Apartment deleted: id=%s", apartment_id)
