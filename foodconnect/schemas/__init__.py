"""
Pydantic schemas for ledger input validation and read models.
"""
from foodconnect.schemas.location import LocationBase, LocationCreate, LocationResponse
from foodconnect.schemas.user import UserBase, UserCreate, UserRoleAssign, UserResponse
from foodconnect.schemas.food_item import (
    FoodItemBase, FoodItemCreate, FoodItemStatusUpdate, FoodItemResponse
)
from foodconnect.schemas.request import RequestCreate, RequestStatusUpdate, RequestResponse
from foodconnect.schemas.transaction import TransactionCreate, TransactionResponse

__all__ = [
    # Location schemas
    "LocationBase", "LocationCreate", "LocationResponse",

    # User schemas
    "UserBase", "UserCreate", "UserRoleAssign", "UserResponse",

    # Food item schemas
    "FoodItemBase", "FoodItemCreate", "FoodItemStatusUpdate", "FoodItemResponse",

    # Request schemas
    "RequestCreate", "RequestStatusUpdate", "RequestResponse",

    # Transaction schemas
    "TransactionCreate", "TransactionResponse",
]
