"""Ledger exceptions and translation of database integrity errors."""
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from .logging_config import get_logger

logger = get_logger("exceptions")


class LedgerError(Exception):
    """Base exception for ledger-specific errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConstraintViolation(LedgerError):
    """Raised when an enum, uniqueness, pattern or foreign-key rule is broken."""


class QuantityExceeded(LedgerError):
    """Raised when a requested or transacted quantity exceeds what is available."""

    def __init__(self, requested, available, item_id: int):
        super().__init__(
            message=f"Quantity {requested} exceeds available {available} for food item {item_id}",
            details={"requested": str(requested), "available": str(available), "item_id": item_id}
        )


class InvalidParties(LedgerError):
    """Raised when a transaction's supplier or recipient does not match the item and its selected request."""


class DuplicateTransaction(LedgerError):
    """Raised when a food item already has a transaction."""

    def __init__(self, item_id: Optional[int]):
        super().__init__(
            message=f"Food item {item_id} already has a transaction",
            details={"item_id": item_id}
        )


class NotFound(LedgerError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, resource: str, identifier: Union[int, str]):
        super().__init__(
            message=f"{resource} with identifier '{identifier}' not found",
            details={"resource": resource, "identifier": str(identifier)}
        )


def from_validation_error(exc: PydanticValidationError) -> ConstraintViolation:
    """Convert a pydantic validation failure into a ConstraintViolation."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": " -> ".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    return ConstraintViolation(
        f"Validation failed for {exc.title}",
        details={"validation_errors": errors}
    )


def from_integrity_error(exc: IntegrityError, item_id: Optional[int] = None) -> LedgerError:
    """Map a database IntegrityError onto the ledger error it represents."""
    detail = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)

    # The unique index on transactions.item_id decides concurrent inserts
    if "transactions.item_id" in detail or "uq_transactions_item_id" in detail:
        return DuplicateTransaction(item_id)

    return ConstraintViolation(
        "Data integrity constraint violated",
        details={"detail": detail}
    )
