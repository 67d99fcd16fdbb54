"""
Pydantic schemas for Transaction model.
"""
from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from foodconnect.models.enums import TransactionStatus


class TransactionCreate(BaseModel):
    """Schema for recording a hand-over between supplier and recipient."""
    item_id: int
    supplier_id: int
    recipient_id: int
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    model_config = ConfigDict(from_attributes=True)

    transaction_id: int
    item_id: int
    supplier_id: int
    recipient_id: int
    quantity: Decimal
    status: TransactionStatus
    created_at: Optional[datetime] = None
