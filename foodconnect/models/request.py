"""
Request model: recipients asking for part of a food listing.
"""
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodconnect.core.database import Base, TimestampMixin
from foodconnect.models.enums import RequestStatus, UrgencyLevel, sql_in


class Request(TimestampMixin, Base):
    """A recipient's request against one food item."""

    __tablename__ = "requests"

    request_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Foreign keys
    item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("food_items.item_id", ondelete="CASCADE"),
        nullable=False
    )
    recipient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )

    quantity_needed: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    urgency_level: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=UrgencyLevel.MEDIUM.value,
        server_default=UrgencyLevel.MEDIUM.value
    )
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=RequestStatus.PENDING.value,
        server_default=RequestStatus.PENDING.value
    )

    # Relationships
    item = relationship("FoodItem", back_populates="requests")
    recipient = relationship("User", back_populates="requests")

    __table_args__ = (
        CheckConstraint(sql_in("urgency_level", UrgencyLevel), name="urgency_level"),
        CheckConstraint(sql_in("status", RequestStatus), name="status"),
        Index("idx_requests_item_id", "item_id"),
        Index("idx_requests_recipient_id", "recipient_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Request(id={self.request_id}, item={self.item_id}, status={self.status})>"
