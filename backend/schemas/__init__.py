# Schemas package
from .apartments import ApartmentCreate, ApartmentResponse
from .fees import FeeCreate, FeeResponse
from .health import HealthResponse
from .vehicles import VehicleCreate, VehicleView

__all__ = [
    "ApartmentCreate",
    "ApartmentResponse",
    "FeeCreate",
    "FeeResponse",
    "HealthResponse",
    "VehicleCreate",
    "VehicleView",
]
