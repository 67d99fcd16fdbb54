"""
User and UserRole models.
"""
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from foodconnect.core.database import Base, TimestampMixin
from foodconnect.models.enums import Occupation, Role, sql_in

# Digits, optionally prefixed with '+'
CONTACT_NUMBER_CHECK = "contact_number GLOB '[0-9]*' OR contact_number GLOB '+[0-9]*'"


class User(TimestampMixin, Base):
    """Marketplace account. Holds zero or more roles."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Profile information
    user_fullname: Mapped[str] = mapped_column(Text, nullable=False)
    occupation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.location_id", ondelete="RESTRICT"),
        nullable=False
    )
    contact_number: Mapped[str] = mapped_column(Text, nullable=False)

    # Credentials
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)  # bcrypt hash

    # Relationships
    location = relationship("Location", back_populates="users")
    roles = relationship(
        "UserRole",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    food_items = relationship(
        "FoodItem",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    requests = relationship(
        "Request",
        back_populates="recipient",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint(sql_in("occupation", Occupation), name="occupation"),
        CheckConstraint(CONTACT_NUMBER_CHECK, name="contact_number"),
        {"sqlite_autoincrement": True},
    )

    @property
    def role_names(self) -> set[str]:
        return {r.role for r in self.roles}

    def __repr__(self) -> str:
        return f"<User(id={self.user_id}, email={self.email})>"


class UserRole(Base):
    """(user, role) pair. A user may be both Supplier and Recipient."""

    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        primary_key=True
    )
    role: Mapped[str] = mapped_column(Text, primary_key=True)

    user = relationship("User", back_populates="roles")

    __table_args__ = (
        CheckConstraint(sql_in("role", Role), name="role"),
        Index("idx_user_roles_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<UserRole(user_id={self.user_id}, role={self.role})>"
