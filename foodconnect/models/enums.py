"""
Enumerated value sets stored in the ledger.
The string values are the exact values persisted in the database.
"""
from enum import Enum


class Occupation(str, Enum):
    """Supplier business type. The empty string means 'not given'."""
    RESTAURANT = "Restaurant"
    GROCERY_STORE = "Grocery Store"
    FARM = "Farm"
    BAKERY = "Bakery"
    MANUFACTURER = "Manufacturer"
    OTHER = "Other"
    NONE = ""


class Role(str, Enum):
    """Roles a user can hold."""
    SUPPLIER = "Supplier"
    RECIPIENT = "Recipient"


class FoodType(str, Enum):
    """Food listing categories."""
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    DAIRY = "Dairy"
    BAKERY = "Bakery"
    MEAT = "Meat"
    GRAINS = "Grains"
    BEVERAGES = "Beverages"
    OTHER = "Other"


class DeliveryOption(str, Enum):
    PICKUP = "Pickup"
    DELIVERY = "Delivery"


class FoodItemStatus(str, Enum):
    """Listing lifecycle: Unselected -> Pending -> Selected -> Completed."""
    UNSELECTED = "Unselected"
    PENDING = "Pending"
    SELECTED = "Selected"
    COMPLETED = "Completed"


class RequestStatus(str, Enum):
    PENDING = "Pending"
    SELECTED = "Selected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class UrgencyLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TransactionStatus(str, Enum):
    IN_PROGRESS = "In-Progress"
    COMPLETED = "Completed"


def sql_in(column: str, enum_cls: type[Enum]) -> str:
    """Build the `column IN (...)` expression for a CHECK constraint."""
    values = ", ".join("'" + member.value.replace("'", "''") + "'" for member in enum_cls)
    return f"{column} IN ({values})"
