"""
Transaction operations: participant and quantity validation for hand-overs.
"""
from typing import Any, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from foodconnect.core.database import atomic
from foodconnect.exceptions import DuplicateTransaction, InvalidParties, NotFound, QuantityExceeded
from foodconnect.models import FoodItem, Request, RequestStatus, Role, Transaction, TransactionStatus
from foodconnect.schemas.transaction import TransactionCreate
from foodconnect.services.base import flush, load, logger, rejected
from foodconnect.services.food_items import get_food_item
from foodconnect.services.users import has_role


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    transaction = db.scalar(select(Transaction).where(Transaction.transaction_id == transaction_id))
    if transaction is None:
        raise rejected(NotFound("Transaction", transaction_id))
    return transaction


def get_transaction_for_item(db: Session, item_id: int) -> Optional[Transaction]:
    return db.scalar(select(Transaction).where(Transaction.item_id == item_id))


def list_transactions(db: Session, user_id: Optional[int] = None) -> list[Transaction]:
    """Transactions, optionally those where the user is supplier or recipient."""
    stmt = select(Transaction).order_by(Transaction.transaction_id)
    if user_id is not None:
        stmt = stmt.where(or_(Transaction.supplier_id == user_id, Transaction.recipient_id == user_id))
    return list(db.scalars(stmt))


def validate_parties(db: Session, item: FoodItem, supplier_id: int, recipient_id: int) -> None:
    """
    Check the supplier and recipient of a transaction on `item`.

    The supplier must own the item and hold the Supplier role. The recipient
    must be the recipient of the item's only Selected request and hold the
    Recipient role. More than one Selected request is rejected.
    """
    problems = []

    if supplier_id != item.user_id:
        problems.append("supplier does not own the food item")

    selected = list(db.scalars(
        select(Request.recipient_id).where(
            Request.item_id == item.item_id,
            Request.status == RequestStatus.SELECTED.value
        )
    ))
    if len(selected) != 1:
        problems.append(f"expected exactly one selected request, found {len(selected)}")
    elif selected[0] != recipient_id:
        problems.append("recipient is not the recipient of the selected request")

    if not has_role(db, supplier_id, Role.SUPPLIER):
        problems.append("supplier does not hold the Supplier role")
    if not has_role(db, recipient_id, Role.RECIPIENT):
        problems.append("recipient does not hold the Recipient role")

    if problems:
        raise rejected(InvalidParties(
            "Invalid supplier or recipient",
            details={
                "item_id": item.item_id,
                "supplier_id": supplier_id,
                "recipient_id": recipient_id,
                "problems": problems
            }
        ))


def create_transaction(db: Session, data: TransactionCreate | dict[str, Any]) -> Transaction:
    """
    Record the hand-over of a food item.

    Checks run in order: item exists, item has no transaction yet, parties
    are valid, quantity is within what the item has available. The new
    transaction starts In-Progress.

    Raises:
        NotFound: item does not exist
        DuplicateTransaction: item already has a transaction
        InvalidParties: supplier/recipient mismatch or missing role
        QuantityExceeded: quantity > quantity_available
    """
    payload = load(TransactionCreate, data)

    with atomic(db):
        item = get_food_item(db, payload.item_id, for_update=True)

        if get_transaction_for_item(db, item.item_id) is not None:
            raise rejected(DuplicateTransaction(item.item_id))

        validate_parties(db, item, payload.supplier_id, payload.recipient_id)

        if payload.quantity > item.quantity_available:
            raise rejected(QuantityExceeded(payload.quantity, item.quantity_available, item.item_id))

        transaction = Transaction(
            item_id=item.item_id,
            supplier_id=payload.supplier_id,
            recipient_id=payload.recipient_id,
            quantity=payload.quantity,
            status=TransactionStatus.IN_PROGRESS.value,
        )
        db.add(transaction)
        flush(db, item_id=item.item_id)

    logger.info(
        f"[TRANSACTION] Created transaction_id={transaction.transaction_id} item_id={transaction.item_id} "
        f"supplier_id={transaction.supplier_id} recipient_id={transaction.recipient_id} qty={transaction.quantity}"
    )
    return transaction


def complete_transaction(db: Session, transaction_id: int) -> Transaction:
    """Mark a transaction Completed. Completing twice is a no-op."""
    with atomic(db):
        transaction = get_transaction(db, transaction_id)
        if transaction.status == TransactionStatus.COMPLETED.value:
            return transaction
        transaction.status = TransactionStatus.COMPLETED.value
        flush(db)

    logger.info(f"[TRANSACTION] transaction_id={transaction_id} completed")
    return transaction
