"""
Pydantic schemas for Request model.
"""
from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from foodconnect.models.enums import RequestStatus, UrgencyLevel


class RequestCreate(BaseModel):
    """Schema for a recipient asking for part of a listing."""
    item_id: int
    recipient_id: int
    quantity_needed: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    urgency_level: UrgencyLevel = UrgencyLevel.MEDIUM


class RequestStatusUpdate(BaseModel):
    """Schema for changing a request's status."""
    status: RequestStatus


class RequestResponse(BaseModel):
    """Schema for request response."""
    model_config = ConfigDict(from_attributes=True)

    request_id: int
    item_id: int
    recipient_id: int
    quantity_needed: Decimal
    urgency_level: Optional[UrgencyLevel] = None
    status: RequestStatus
    created_at: Optional[datetime] = None
