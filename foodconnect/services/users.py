"""
User signup and role management.
"""
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodconnect.core.database import atomic
from foodconnect.core.security import get_password_hash
from foodconnect.exceptions import ConstraintViolation, NotFound
from foodconnect.models import Role, User, UserRole
from foodconnect.schemas.user import UserCreate, UserRoleAssign
from foodconnect.services.base import flush, load, logger, rejected
from foodconnect.services.locations import get_location


def get_user(db: Session, user_id: int) -> User:
    user = db.scalar(select(User).where(User.user_id == user_id))
    if user is None:
        raise rejected(NotFound("User", user_id))
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalar(select(User).where(User.email == email))


def user_roles(db: Session, user_id: int) -> set[Role]:
    """Roles currently held by a user."""
    rows = db.scalars(select(UserRole.role).where(UserRole.user_id == user_id))
    return {Role(r) for r in rows}


def has_role(db: Session, user_id: int, role: Role) -> bool:
    found = db.scalar(
        select(UserRole.user_id).where(UserRole.user_id == user_id, UserRole.role == role.value)
    )
    return found is not None


def create_user(db: Session, data: UserCreate | dict[str, Any]) -> User:
    """
    Sign up a user.

    The password is stored as a bcrypt hash and any roles in the payload are
    granted in the same unit of work.

    Raises:
        ConstraintViolation: email taken, occupation or contact number invalid
        NotFound: location does not exist
    """
    payload = load(UserCreate, data)

    with atomic(db):
        get_location(db, payload.location_id)

        if get_user_by_email(db, payload.email) is not None:
            raise rejected(ConstraintViolation(
                f"User with email '{payload.email}' already exists",
                details={"field": "email", "value": payload.email}
            ))

        user = User(
            user_fullname=payload.user_fullname,
            occupation=payload.occupation.value if payload.occupation is not None else None,
            location_id=payload.location_id,
            contact_number=payload.contact_number,
            email=payload.email,
            password=get_password_hash(payload.password),
        )
        db.add(user)
        flush(db)

        for role in dict.fromkeys(payload.roles):
            db.add(UserRole(user_id=user.user_id, role=role.value))
        flush(db)

    logger.info(f"[USER] Created user_id={user.user_id} roles={[r.value for r in payload.roles]}")
    return user


def assign_role(db: Session, user_id: int, role: Role | str) -> UserRole:
    """Grant a role. A user may hold Supplier and Recipient at once, each only once."""
    role = load(UserRoleAssign, {"user_id": user_id, "role": role}).role

    with atomic(db):
        get_user(db, user_id)

        if has_role(db, user_id, role):
            raise rejected(ConstraintViolation(
                f"User {user_id} already holds role {role.value}",
                details={"user_id": user_id, "role": role.value}
            ))

        user_role = UserRole(user_id=user_id, role=role.value)
        db.add(user_role)
        flush(db)

    logger.info(f"[USER] Granted {role.value} to user_id={user_id}")
    return user_role


def revoke_role(db: Session, user_id: int, role: Role | str) -> None:
    role = load(UserRoleAssign, {"user_id": user_id, "role": role}).role

    with atomic(db):
        user_role = db.get(UserRole, (user_id, role.value))
        if user_role is None:
            raise rejected(NotFound("UserRole", f"{user_id}:{role.value}"))
        db.delete(user_role)
        flush(db)

    logger.info(f"[USER] Revoked {role.value} from user_id={user_id}")


def delete_user(db: Session, user_id: int) -> None:
    """Delete a user together with their roles, listings, requests and transactions."""
    with atomic(db):
        user = get_user(db, user_id)
        db.delete(user)
        flush(db)

    # Rows removed by ON DELETE CASCADE are still in the identity map
    db.expire_all()
    logger.info(f"[USER] Deleted user_id={user_id}")
