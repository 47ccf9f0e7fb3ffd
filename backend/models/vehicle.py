"""Vehicle model for DB persistence."""
from sqlalchemy import Enum as SQLEnum
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base
from models.vehicle_type import VehicleType

__all__ = ["Vehicle", "VehicleType"]


class Vehicle(Base):
    """Vehicle table: id, license (unique plate), vehicle_type, apartment_id."""

    __tablename__ = "vehicle"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    license: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    vehicle_type: Mapped[VehicleType] = mapped_column(
        SQLEnum(VehicleType, name="vehicle_type", native_enum=False, length=16),
        nullable=False,
    )
    apartment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("apartment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    apartment: Mapped["Apartment"] = relationship("Apartment", back_populates="vehicles")

    def __repr__(self) -> str:
        return f"<Vehicle {self.license} type={self.vehicle_type}>"
