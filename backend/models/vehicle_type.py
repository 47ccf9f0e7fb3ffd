"""Vehicle categories, shared by the ORM model and the API schemas."""
from enum import Enum


class VehicleType(str, Enum):
    """Kinds of vehicle a resident can register. Stored by name."""

    CAR = "CAR"
    MOTORCYCLE = "MOTORCYCLE"
    BICYCLE = "BICYCLE"
    TRUCK = "TRUCK"
