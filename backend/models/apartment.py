"""Apartment model for DB persistence."""
from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base


class Apartment(Base):
    """Apartment table: id, name (unit label, unique), floor. Vehicles hang off it."""

    __tablename__ = "apartment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    vehicles: Mapped[list["Vehicle"]] = relationship(
        "Vehicle",
        back_populates="apartment",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Apartment {self.name}>"
