"""
Pydantic schemas for Location model.
"""
from pydantic import BaseModel, ConfigDict, Field


class LocationBase(BaseModel):
    """Base location schema."""
    province: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    street_address: str = Field(..., min_length=1)


class LocationCreate(LocationBase):
    """Schema for creating a location."""


class LocationResponse(LocationBase):
    """Schema for location response."""
    model_config = ConfigDict(from_attributes=True)

    location_id: int
