"""
Helpers shared by the ledger services: payload loading, rejection logging and flushing.
"""
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodconnect.exceptions import (
    ConstraintViolation,
    LedgerError,
    from_integrity_error,
    from_validation_error,
)
from foodconnect.logging_config import get_logger

logger = get_logger("services")

SchemaT = TypeVar("SchemaT", bound=BaseModel)
EnumT = TypeVar("EnumT", bound=Enum)


def rejected(error: LedgerError) -> LedgerError:
    """Log a rejected operation and hand the error back for raising."""
    logger.warning(
        f"[REJECTED] {type(error).__name__}: {error.message}",
        extra={"details": error.details}
    )
    return error


def load(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate raw input (dict or schema instance) against a schema."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise rejected(from_validation_error(exc)) from exc


def load_enum(enum_cls: type[EnumT], value: Any) -> EnumT:
    """Coerce a raw value into one of the ledger's enumerated sets."""
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = [member.value for member in enum_cls]
        raise rejected(ConstraintViolation(
            f"'{value}' is not a valid {enum_cls.__name__}",
            details={"value": str(value), "allowed": allowed}
        )) from exc


def flush(db: Session, item_id: Optional[int] = None) -> None:
    """Flush pending writes, translating integrity failures into ledger errors."""
    try:
        db.flush()
    except IntegrityError as exc:
        raise rejected(from_integrity_error(exc, item_id)) from exc
