"""
Location model shared by users and food listings.
"""
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodconnect.core.database import Base


class Location(Base):
    """Street address. Rows are never updated and cannot be deleted while referenced."""

    __tablename__ = "locations"

    location_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    province: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    zip_code: Mapped[str] = mapped_column(Text, nullable=False)
    street_address: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships (deletes are left to the RESTRICT foreign keys)
    users = relationship("User", back_populates="location", passive_deletes="all")
    food_items = relationship("FoodItem", back_populates="location", passive_deletes="all")

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Location(id={self.location_id}, city={self.city}, zip={self.zip_code})>"
