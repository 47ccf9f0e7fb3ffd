"""Pydantic schemas for fee API."""
from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

# Fee type whose payment cannot be waived.
AREA_FEE_TYPE = "area"


class FeeCreate(BaseModel):
    """Payload for creating a fee. Area fees are always compulsory."""

    type: str = Field(..., min_length=2, max_length=64)
    amount: float = Field(..., gt=0)
    month: str = Field(..., min_length=1, max_length=16)
    description: str = Field(..., min_length=2, max_length=255)
    compulsory: bool = True

    @field_validator("type", "month", "description")
    @classmethod
    def strip_text(cls, v: str, info: ValidationInfo) -> str:
        v = v.strip()
        minimum = 1 if info.field_name == "month" else 2
        if len(v) < minimum:
            raise ValueError(f"{info.field_name} must be at least {minimum} non-blank characters")
        return v

    @model_validator(mode="after")
    def area_fee_is_compulsory(self) -> "FeeCreate":
        if self.type == AREA_FEE_TYPE:
            self.compulsory = True
        return self


class FeeResponse(BaseModel):
    """Fee in API responses."""

    id: int
    type: str
    amount: float
    month: str
    description: str
    compulsory: bool
