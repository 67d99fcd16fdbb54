"""
Reset the ledger schema and load the demo data set.

Usage:
    python -m foodconnect.seed
"""
from datetime import date
from decimal import Decimal

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from foodconnect.core.database import drop_db, get_db_context, get_engine, init_db
from foodconnect.logging_config import get_logger
from foodconnect.models import FoodItemStatus, RequestStatus
from foodconnect import services

logger = get_logger("seed")

DEMO_LOCATIONS = [
    {"province": "Western Cape", "city": "Cape Town", "zip_code": "8001", "street_address": "123 Long Street"},
    {"province": "Gauteng", "city": "Johannesburg", "zip_code": "2001", "street_address": "456 Main Road"},
    {"province": "KwaZulu-Natal", "city": "Durban", "zip_code": "4001", "street_address": "789 Beachfront Avenue"},
]

# location is an index into DEMO_LOCATIONS
DEMO_USERS = [
    {"user_fullname": "Alice Smith", "occupation": "Restaurant", "location": 0,
     "contact_number": "0631234567", "email": "alice@example.com", "password": "hashed_password_1",
     "roles": ["Supplier", "Recipient"]},
    {"user_fullname": "Bob Johnson", "occupation": "Grocery Store", "location": 1,
     "contact_number": "+27712345678", "email": "bob@example.com", "password": "hashed_password_2",
     "roles": ["Supplier"]},
    {"user_fullname": "Carol White", "occupation": "", "location": 2,
     "contact_number": "0823456789", "email": "carol@example.com", "password": "hashed_password_3",
     "roles": ["Recipient"]},
    {"user_fullname": "David Brown", "occupation": "Bakery", "location": 0,
     "contact_number": "+27609876543", "email": "david@example.com", "password": "hashed_password_4",
     "roles": ["Supplier", "Recipient"]},
]

# user is an index into DEMO_USERS
DEMO_FOOD_ITEMS = [
    {"user": 0, "food_type": "Vegetables", "food_name": "Carrots", "quantity_available": Decimal("10.0"),
     "expiry_date": date(2025, 11, 15), "delivery_option": "Pickup", "description": "Fresh carrots",
     "status": FoodItemStatus.UNSELECTED},
    {"user": 0, "food_type": "Fruits", "food_name": "Apples", "quantity_available": Decimal("8.0"),
     "expiry_date": date(2025, 11, 10), "delivery_option": "Delivery", "description": "Locally grown apples",
     "status": FoodItemStatus.PENDING},
    {"user": 1, "food_type": "Grains", "food_name": "Rice", "quantity_available": Decimal("20.0"),
     "expiry_date": date(2026, 1, 1), "delivery_option": "Pickup", "description": "2kg rice bags, sealed",
     "status": FoodItemStatus.SELECTED},
    {"user": 3, "food_type": "Bakery", "food_name": "Bread", "quantity_available": Decimal("6.0"),
     "expiry_date": date(2025, 11, 5), "delivery_option": "Delivery", "description": "Freshly baked loaves",
     "status": FoodItemStatus.UNSELECTED},
]

# item and recipient are indexes into DEMO_FOOD_ITEMS and DEMO_USERS
DEMO_REQUESTS = [
    {"item": 1, "recipient": 3, "quantity_needed": Decimal("5.0"), "status": RequestStatus.PENDING},
    {"item": 2, "recipient": 2, "quantity_needed": Decimal("10.0"), "status": RequestStatus.SELECTED},
]


def reset_db(engine: Engine) -> None:
    """Drop and recreate every ledger table."""
    drop_db(engine)
    init_db(engine)


def seed_demo_data(db: Session) -> dict[str, int]:
    """Load the demo data set through the ledger services. Returns row counts."""
    locations = [services.create_location(db, data) for data in DEMO_LOCATIONS]

    users = []
    for data in DEMO_USERS:
        data = dict(data)
        data["location_id"] = locations[data.pop("location")].location_id
        users.append(services.create_user(db, data))

    items = []
    for data in DEMO_FOOD_ITEMS:
        data = dict(data)
        status = data.pop("status")
        owner = users[data.pop("user")]
        data["user_id"] = owner.user_id
        data["location_id"] = owner.location_id
        item = services.create_food_item(db, data)
        if status != FoodItemStatus.UNSELECTED:
            services.update_food_item_status(db, item.item_id, status)
        items.append(item)

    requests = []
    for data in DEMO_REQUESTS:
        request = services.create_request(db, {
            "item_id": items[data["item"]].item_id,
            "recipient_id": users[data["recipient"]].user_id,
            "quantity_needed": data["quantity_needed"],
        })
        if data["status"] != RequestStatus.PENDING:
            services.update_request_status(db, request.request_id, data["status"])
        requests.append(request)

    counts = {
        "locations": len(locations),
        "users": len(users),
        "user_roles": sum(len(u["roles"]) for u in DEMO_USERS),
        "food_items": len(items),
        "requests": len(requests),
    }
    logger.info(f"[SEED] Demo data loaded: {counts}")
    return counts


def main() -> None:
    engine = get_engine()
    reset_db(engine)
    with get_db_context() as db:
        seed_demo_data(db)


if __name__ == "__main__":
    main()
