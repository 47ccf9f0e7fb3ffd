"""Pydantic schemas for apartment API."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ApartmentCreate(BaseModel):
    """Payload for creating an apartment."""

    name: str = Field(..., min_length=1, max_length=64)
    floor: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Strip the unit label; a whitespace-only name is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class ApartmentResponse(BaseModel):
    """Apartment in API responses."""

    id: int
    name: str
    floor: Optional[int] = None
    vehicle_count: int = 0
