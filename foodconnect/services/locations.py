"""
Location operations.
"""
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from foodconnect.core.database import atomic
from foodconnect.exceptions import ConstraintViolation, NotFound
from foodconnect.models import FoodItem, Location, User
from foodconnect.schemas.location import LocationCreate
from foodconnect.services.base import flush, load, logger, rejected


def get_location(db: Session, location_id: int) -> Location:
    location = db.scalar(select(Location).where(Location.location_id == location_id))
    if location is None:
        raise rejected(NotFound("Location", location_id))
    return location


def list_locations(db: Session) -> list[Location]:
    return list(db.scalars(select(Location).order_by(Location.location_id)))


def create_location(db: Session, data: LocationCreate | dict[str, Any]) -> Location:
    """Insert a location. Locations have no update path."""
    payload = load(LocationCreate, data)

    with atomic(db):
        location = Location(**payload.model_dump())
        db.add(location)
        flush(db)

    logger.info(f"[LOCATION] Created location_id={location.location_id} ({location.city})")
    return location


def delete_location(db: Session, location_id: int) -> None:
    """
    Delete a location.

    Raises ConstraintViolation while any user or food item still references it.
    """
    with atomic(db):
        location = get_location(db, location_id)

        users = db.scalar(select(func.count()).select_from(User).where(User.location_id == location_id))
        items = db.scalar(select(func.count()).select_from(FoodItem).where(FoodItem.location_id == location_id))
        if users or items:
            raise rejected(ConstraintViolation(
                f"Location {location_id} is still referenced",
                details={"location_id": location_id, "users": users, "food_items": items}
            ))

        db.delete(location)
        flush(db)

    logger.info(f"[LOCATION] Deleted location_id={location_id}")
