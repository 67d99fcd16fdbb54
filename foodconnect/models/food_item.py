"""
FoodItem model: surplus listings uploaded by suppliers.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodconnect.core.database import Base, TimestampMixin
from foodconnect.models.enums import DeliveryOption, FoodItemStatus, FoodType, sql_in


class FoodItem(TimestampMixin, Base):
    """Surplus listing owned by exactly one supplier."""

    __tablename__ = "food_items"

    item_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Foreign keys
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False
    )
    location_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.location_id", ondelete="RESTRICT"),
        nullable=False
    )

    # Listing details
    food_type: Mapped[str] = mapped_column(Text, nullable=False)
    food_name: Mapped[str] = mapped_column(Text, nullable=False)
    quantity_available: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    expiry_date: Mapped[date] = mapped_column(Date, nullable=False)
    delivery_option: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=FoodItemStatus.UNSELECTED.value,
        server_default=FoodItemStatus.UNSELECTED.value
    )

    # Relationships
    user = relationship("User", back_populates="food_items")
    location = relationship("Location", back_populates="food_items")
    requests = relationship(
        "Request",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    transaction = relationship(
        "Transaction",
        back_populates="item",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(sql_in("food_type", FoodType), name="food_type"),
        CheckConstraint(sql_in("delivery_option", DeliveryOption), name="delivery_option"),
        CheckConstraint(sql_in("status", FoodItemStatus), name="status"),
        CheckConstraint("quantity_available >= 0", name="quantity_available"),
        Index("idx_food_items_status", "status"),
        Index("idx_food_items_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<FoodItem(id={self.item_id}, name={self.food_name}, "
            f"qty={self.quantity_available}, status={self.status})>"
        )
