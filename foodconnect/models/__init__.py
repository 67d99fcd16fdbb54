"""
SQLAlchemy models for the FoodConnect ledger.
Import all models here to ensure they're registered with SQLAlchemy.
"""
from foodconnect.models.enums import (
    DeliveryOption,
    FoodItemStatus,
    FoodType,
    Occupation,
    RequestStatus,
    Role,
    TransactionStatus,
    UrgencyLevel,
)
from foodconnect.models.location import Location
from foodconnect.models.user import User, UserRole
from foodconnect.models.food_item import FoodItem
from foodconnect.models.request import Request
from foodconnect.models.transaction import Transaction

__all__ = [
    "Location",
    "User",
    "UserRole",
    "FoodItem",
    "Request",
    "Transaction",
    "DeliveryOption",
    "FoodItemStatus",
    "FoodType",
    "Occupation",
    "RequestStatus",
    "Role",
    "TransactionStatus",
    "UrgencyLevel",
]
