"""Tests for ledger errors and their translation from library exceptions."""
import pytest
from decimal import Decimal
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from foodconnect.exceptions import (
    ConstraintViolation,
    DuplicateTransaction,
    LedgerError,
    NotFound,
    QuantityExceeded,
    from_integrity_error,
    from_validation_error,
)
from foodconnect.schemas.request import RequestCreate


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO ...", {}, Exception(message))


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("error", [
        ConstraintViolation("bad"),
        QuantityExceeded(Decimal("9"), Decimal("8"), 1),
        DuplicateTransaction(1),
        NotFound("User", 3),
    ])
    def test_all_are_ledger_errors(self, error):
        """Test that every ledger error shares the base class and has details."""
        assert isinstance(error, LedgerError)
        assert isinstance(error.details, dict)

    def test_quantity_exceeded_details(self):
        """Test the details carried by QuantityExceeded."""
        error = QuantityExceeded(Decimal("9.0"), Decimal("8.0"), 2)

        assert error.details == {"requested": "9.0", "available": "8.0", "item_id": 2}
        assert "exceeds available" in error.message

    def test_not_found_details(self):
        """Test the details carried by NotFound."""
        assert NotFound("FoodItem", 7).details == {"resource": "FoodItem", "identifier": "7"}


class TestTranslation:
    """Tests for mapping pydantic and SQLAlchemy errors."""

    def test_from_validation_error(self):
        """Test that field errors are listed by location."""
        with pytest.raises(ValidationError) as exc_info:
            RequestCreate(item_id=1, recipient_id=2, quantity_needed="-1")

        error = from_validation_error(exc_info.value)

        assert isinstance(error, ConstraintViolation)
        assert [e["field"] for e in error.details["validation_errors"]] == ["quantity_needed"]

    def test_unique_transaction_item(self):
        """Test that the transactions unique index maps to DuplicateTransaction."""
        error = from_integrity_error(_integrity_error("UNIQUE constraint failed: transactions.item_id"), item_id=4)

        assert isinstance(error, DuplicateTransaction)
        assert error.details["item_id"] == 4

    def test_other_integrity_errors(self):
        """Test that any other integrity failure is a ConstraintViolation."""
        error = from_integrity_error(_integrity_error("UNIQUE constraint failed: users.email"))

        assert type(error) is ConstraintViolation
        assert "users.email" in error.details["detail"]
