"""Apartment repository: list, get, create, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.apartment import Apartment
from models.vehicle import Vehicle


def list_apartments(session: Session) -> list[Apartment]:
    """Return all apartments ordered by name."""
    result = session.execute(select(Apartment).order_by(Apartment.name))
    return list(result.scalars().all())


def get_apartment(session: Session, apartment_id: int) -> Optional[Apartment]:
    """Return an apartment by id or None."""
    return session.get(Apartment, apartment_id)


def get_apartment_by_name(session: Session, name: str) -> Optional[Apartment]:
    """Return an apartment by name or None."""
    return session.execute(
        select(Apartment).where(Apartment.name == name.strip())
    ).scalar_one_or_none()


def create_apartment(session: Session, name: str, floor: int | None = None) -> Apartment:
    """Create an apartment, commit, and return it."""
    apartment = Apartment(name=name.strip(), floor=floor)
    session.add(apartment)
    session.commit()
    session.refresh(apartment)
    return apartment


def count_apartments(session: Session) -> int:
    """Return the number of apartments."""
    result = session.execute(select(func.count()).select_from(Apartment))
    return result.scalar() or 0


def count_vehicles_by_apartment(session: Session, apartment_id: int) -> int:
    """Return how many vehicles are registered to an apartment."""
    result = session.execute(
        select(func.count()).select_from(Vehicle).where(Vehicle.apartment_id == apartment_id)
    )
    return result.scalar() or 0


def delete_apartment(session: Session, apartment_id: int) -> bool:
    """Delete an apartment and its vehicles. Returns True if deleted, False if not found."""
    apartment = get_apartment(session, apartment_id)
    if apartment is None:
        return False
    session.delete(apartment)
    session.commit()
    return True
