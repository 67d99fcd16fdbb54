"""
Pydantic schemas for FoodItem model.
"""
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from foodconnect.models.enums import DeliveryOption, FoodItemStatus, FoodType


class FoodItemBase(BaseModel):
    """Base food listing schema."""
    food_type: FoodType
    food_name: str = Field(..., min_length=1)
    quantity_available: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    expiry_date: date
    delivery_option: DeliveryOption
    description: Optional[str] = None


class FoodItemCreate(FoodItemBase):
    """Schema for listing surplus food. `user_id` is the supplier."""
    user_id: int
    location_id: int


class FoodItemStatusUpdate(BaseModel):
    """Schema for a supplier-driven status change."""
    status: FoodItemStatus


class FoodItemResponse(FoodItemBase):
    """Schema for food listing response."""
    model_config = ConfigDict(from_attributes=True)

    item_id: int
    user_id: int
    location_id: int
    status: FoodItemStatus
    created_at: Optional[datetime] = None
