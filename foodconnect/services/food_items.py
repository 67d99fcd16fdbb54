"""
Surplus listing operations.
"""
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodconnect.core.database import atomic
from foodconnect.exceptions import NotFound
from foodconnect.models import FoodItem, FoodItemStatus
from foodconnect.schemas.food_item import FoodItemCreate, FoodItemStatusUpdate
from foodconnect.services.base import flush, load, load_enum, logger, rejected
from foodconnect.services.locations import get_location
from foodconnect.services.users import get_user


def get_food_item(db: Session, item_id: int, for_update: bool = False) -> FoodItem:
    """Fetch a listing; `for_update` locks the row on backends that support it."""
    stmt = select(FoodItem).where(FoodItem.item_id == item_id)
    if for_update:
        stmt = stmt.with_for_update()
    item = db.scalar(stmt)
    if item is None:
        raise rejected(NotFound("FoodItem", item_id))
    return item


def list_food_items(
    db: Session,
    status: Optional[FoodItemStatus | str] = None,
    user_id: Optional[int] = None
) -> list[FoodItem]:
    """Listings, optionally filtered by status and/or supplier."""
    stmt = select(FoodItem).order_by(FoodItem.item_id)
    if status is not None:
        stmt = stmt.where(FoodItem.status == load_enum(FoodItemStatus, status).value)
    if user_id is not None:
        stmt = stmt.where(FoodItem.user_id == user_id)
    return list(db.scalars(stmt))


def create_food_item(db: Session, data: FoodItemCreate | dict[str, Any]) -> FoodItem:
    """
    List surplus food for a supplier.

    The listing starts out Unselected.

    Raises:
        ConstraintViolation: unknown food type or delivery option, negative quantity
        NotFound: supplier or location does not exist
    """
    payload = load(FoodItemCreate, data)

    with atomic(db):
        get_user(db, payload.user_id)
        get_location(db, payload.location_id)

        item = FoodItem(
            user_id=payload.user_id,
            location_id=payload.location_id,
            food_type=payload.food_type.value,
            food_name=payload.food_name,
            quantity_available=payload.quantity_available,
            expiry_date=payload.expiry_date,
            delivery_option=payload.delivery_option.value,
            description=payload.description,
            status=FoodItemStatus.UNSELECTED.value,
        )
        db.add(item)
        flush(db)

    logger.info(
        f"[FOOD_ITEM] Created item_id={item.item_id} '{item.food_name}' "
        f"qty={item.quantity_available} for user_id={item.user_id}"
    )
    return item


def update_food_item_status(db: Session, item_id: int, status: FoodItemStatus | str) -> FoodItem:
    """
    Set a listing's status directly.

    Used by suppliers for the moves the request sync does not make
    (Pending -> Selected, Selected -> Completed).
    """
    status = load(FoodItemStatusUpdate, {"status": status}).status

    with atomic(db):
        item = get_food_item(db, item_id, for_update=True)
        previous = item.status
        item.status = status.value
        flush(db)

    logger.info(f"[FOOD_ITEM] item_id={item_id} status {previous} -> {status.value}")
    return item


def delete_food_item(db: Session, item_id: int) -> None:
    """Delete a listing together with its requests and transaction."""
    with atomic(db):
        item = get_food_item(db, item_id)
        db.delete(item)
        flush(db)

    db.expire_all()
    logger.info(f"[FOOD_ITEM] Deleted item_id={item_id}")
