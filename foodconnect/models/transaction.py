"""
Transaction model: the donation hand-over between a supplier and a recipient.
"""
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodconnect.core.database import Base, TimestampMixin
from foodconnect.models.enums import TransactionStatus, sql_in


class Transaction(TimestampMixin, Base):
    """At most one transaction exists per food item."""

    __tablename__ = "transactions"

    transaction_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Foreign keys
    item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("food_items.item_id", ondelete="CASCADE"),
        unique=True,
        nullable=False
    )
    supplier_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )
    recipient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )

    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=TransactionStatus.IN_PROGRESS.value,
        server_default=TransactionStatus.IN_PROGRESS.value
    )

    # Relationships
    item = relationship("FoodItem", back_populates="transaction")
    supplier = relationship("User", foreign_keys=[supplier_id])
    recipient = relationship("User", foreign_keys=[recipient_id])

    __table_args__ = (
        CheckConstraint(sql_in("status", TransactionStatus), name="status"),
        Index("idx_transactions_item_id", "item_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Transaction(id={self.transaction_id}, item={self.item_id}, status={self.status})>"
