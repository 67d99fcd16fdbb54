"""
Request operations, including the request -> food item status sync.
"""
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodconnect.core.database import atomic
from foodconnect.exceptions import NotFound, QuantityExceeded
from foodconnect.models import FoodItem, FoodItemStatus, Request, RequestStatus
from foodconnect.schemas.request import RequestCreate, RequestStatusUpdate
from foodconnect.services.base import flush, load, load_enum, logger, rejected
from foodconnect.services.food_items import get_food_item
from foodconnect.services.users import get_user

# Request status -> (food item status it applies to, food item status it moves to)
STATUS_SYNC = {
    RequestStatus.SELECTED: (FoodItemStatus.UNSELECTED, FoodItemStatus.PENDING),
    RequestStatus.CANCELLED: (FoodItemStatus.PENDING, FoodItemStatus.UNSELECTED),
}


def get_request(db: Session, request_id: int) -> Request:
    request = db.scalar(select(Request).where(Request.request_id == request_id))
    if request is None:
        raise rejected(NotFound("Request", request_id))
    return request


def list_requests(
    db: Session,
    item_id: Optional[int] = None,
    recipient_id: Optional[int] = None,
    status: Optional[RequestStatus | str] = None
) -> list[Request]:
    stmt = select(Request).order_by(Request.request_id)
    if item_id is not None:
        stmt = stmt.where(Request.item_id == item_id)
    if recipient_id is not None:
        stmt = stmt.where(Request.recipient_id == recipient_id)
    if status is not None:
        stmt = stmt.where(Request.status == load_enum(RequestStatus, status).value)
    return list(db.scalars(stmt))


def create_request(db: Session, data: RequestCreate | dict[str, Any]) -> Request:
    """
    Ask for part of a listing.

    The quantity is checked against the listing's available quantity at this
    moment only: nothing is reserved and the listing is not decremented.

    Raises:
        QuantityExceeded: quantity_needed > quantity_available
        NotFound: item or recipient does not exist
    """
    payload = load(RequestCreate, data)

    with atomic(db):
        item = get_food_item(db, payload.item_id, for_update=True)
        get_user(db, payload.recipient_id)

        if payload.quantity_needed > item.quantity_available:
            raise rejected(QuantityExceeded(payload.quantity_needed, item.quantity_available, item.item_id))

        request = Request(
            item_id=payload.item_id,
            recipient_id=payload.recipient_id,
            quantity_needed=payload.quantity_needed,
            urgency_level=payload.urgency_level.value,
            status=RequestStatus.PENDING.value,
        )
        db.add(request)
        flush(db)

    logger.info(
        f"[REQUEST] Created request_id={request.request_id} item_id={request.item_id} "
        f"recipient_id={request.recipient_id} qty={request.quantity_needed}"
    )
    return request


def sync_food_item_status(item: FoodItem, request_status: RequestStatus) -> bool:
    """
    Propagate a request status change to its food item.

    Selected moves an Unselected item to Pending; Cancelled moves a Pending
    item back to Unselected. Any other combination leaves the item alone.
    Returns True when the item changed.
    """
    rule = STATUS_SYNC.get(request_status)
    if rule is None:
        return False

    source, target = rule
    if item.status != source.value:
        return False

    item.status = target.value
    return True


def update_request_status(db: Session, request_id: int, status: RequestStatus | str) -> Request:
    """
    Change a request's status and sync its food item in the same unit of work.

    Raises:
        ConstraintViolation: unknown status
        NotFound: request does not exist
    """
    status = load(RequestStatusUpdate, {"status": status}).status

    with atomic(db):
        request = get_request(db, request_id)
        item = get_food_item(db, request.item_id, for_update=True)

        previous = request.status
        request.status = status.value
        item_before = item.status
        changed = sync_food_item_status(item, status)
        flush(db)

    logger.info(f"[REQUEST] request_id={request_id} status {previous} -> {status.value}")
    if changed:
        logger.info(f"[REQUEST] Synced item_id={item.item_id} status {item_before} -> {item.status}")
    return request
