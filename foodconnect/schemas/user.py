"""
Pydantic schemas for User and UserRole models.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from foodconnect.models.enums import Occupation, Role

# Digits, optionally prefixed with '+'
CONTACT_NUMBER_PATTERN = r"^\+?[0-9]+$"


class UserBase(BaseModel):
    """Base user schema with common fields."""
    user_fullname: str = Field(..., min_length=1)
    occupation: Optional[Occupation] = None
    location_id: int
    contact_number: str = Field(..., pattern=CONTACT_NUMBER_PATTERN)
    email: EmailStr


class UserCreate(UserBase):
    """Schema for signup. Roles are assigned in the same operation."""
    password: str = Field(..., min_length=1, max_length=72)
    roles: list[Role] = Field(default_factory=list)


class UserRoleAssign(BaseModel):
    """Schema for granting a role."""
    user_id: int
    role: Role


class UserResponse(UserBase):
    """Schema for user response. The password hash is never exposed."""
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    created_at: Optional[datetime] = None
    role_names: set[Role] = Field(default_factory=set)
