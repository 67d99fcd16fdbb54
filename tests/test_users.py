"""Tests for location, user and role operations."""
import pytest
from sqlalchemy import func, select

from foodconnect.core.security import verify_password
from foodconnect.exceptions import ConstraintViolation, NotFound
from foodconnect.models import FoodItem, Location, Role, User, UserRole
from foodconnect.schemas.user import UserCreate
from foodconnect.services import (
    assign_role,
    create_location,
    create_user,
    delete_location,
    delete_user,
    get_location,
    get_user,
    list_locations,
    revoke_role,
    user_roles,
)


def _user_count(db) -> int:
    return db.scalar(select(func.count()).select_from(User))


@pytest.fixture
def signup(sample_locations):
    """Valid signup payload for a new user."""
    return {
        "user_fullname": "Grace Hopper",
        "occupation": "Farm",
        "location_id": sample_locations[1].location_id,
        "contact_number": "+27820000000",
        "email": "grace@example.com",
        "password": "s3cret-pass",
        "roles": ["Supplier"],
    }


class TestLocations:
    """Tests for location operations."""

    def test_create_location(self, test_db):
        """Test creating a location."""
        location = create_location(test_db, {
            "province": "Free State",
            "city": "Bloemfontein",
            "zip_code": "9301",
            "street_address": "1 Church Street",
        })

        assert location.location_id is not None
        assert get_location(test_db, location.location_id).city == "Bloemfontein"

    def test_create_location_requires_fields(self, test_db):
        """Test that an empty street address is rejected."""
        with pytest.raises(ConstraintViolation):
            create_location(test_db, {"province": "X", "city": "Y", "zip_code": "1", "street_address": ""})

        assert list_locations(test_db) == []

    def test_get_missing_location(self, test_db):
        """Test that an unknown location raises NotFound."""
        with pytest.raises(NotFound):
            get_location(test_db, 42)

    def test_delete_unreferenced_location(self, test_db, sample_locations):
        """Test that a location nobody uses can be deleted."""
        delete_location(test_db, sample_locations[2].location_id)

        assert len(list_locations(test_db)) == 2

    def test_delete_referenced_location_blocked(self, test_db, sample_users, sample_food_items):
        """Test that a location used by users or listings cannot be deleted."""
        location_id = sample_users[0].location_id

        with pytest.raises(ConstraintViolation) as exc_info:
            delete_location(test_db, location_id)

        assert exc_info.value.details["users"] == 2
        assert exc_info.value.details["food_items"] == 3
        assert test_db.get(Location, location_id) is not None


class TestCreateUser:
    """Tests for user signup."""

    def test_create_user(self, test_db, signup):
        """Test signing up a user with a role."""
        user = create_user(test_db, signup)

        assert user.user_id is not None
        assert user.email == "grace@example.com"
        assert user.occupation == "Farm"
        assert user_roles(test_db, user.user_id) == {Role.SUPPLIER}

    def test_password_is_hashed(self, test_db, signup):
        """Test that the stored credential is a bcrypt hash of the password."""
        user = create_user(test_db, signup)

        assert user.password != "s3cret-pass"
        assert verify_password("s3cret-pass", user.password)

    def test_accepts_schema_instance(self, test_db, signup):
        """Test that a validated UserCreate is accepted as-is."""
        user = create_user(test_db, UserCreate(**signup))

        assert get_user(test_db, user.user_id).user_fullname == "Grace Hopper"

    def test_both_roles(self, test_db, signup):
        """Test that a user can hold Supplier and Recipient at once."""
        signup["roles"] = ["Supplier", "Recipient", "Supplier"]
        user = create_user(test_db, signup)

        assert user_roles(test_db, user.user_id) == {Role.SUPPLIER, Role.RECIPIENT}

    def test_empty_occupation_allowed(self, test_db, signup):
        """Test that the empty occupation is a valid value."""
        signup["occupation"] = ""
        user = create_user(test_db, signup)

        assert user.occupation == ""

    def test_duplicate_email_rejected(self, test_db, sample_users, signup):
        """Test that a taken email fails with ConstraintViolation and nothing is stored."""
        before = _user_count(test_db)
        signup["email"] = "alice@example.com"

        with pytest.raises(ConstraintViolation) as exc_info:
            create_user(test_db, signup)

        assert exc_info.value.details["field"] == "email"
        assert _user_count(test_db) == before

    def test_invalid_occupation_rejected(self, test_db, signup):
        """Test that an occupation outside the allowed set fails."""
        signup["occupation"] = "Spaceport"

        with pytest.raises(ConstraintViolation):
            create_user(test_db, signup)

        assert _user_count(test_db) == 0

    @pytest.mark.parametrize("number", ["27-71", "phone", "++27712345678", "0631 234567", ""])
    def test_invalid_contact_number_rejected(self, test_db, signup, number):
        """Test that contact numbers must be digits, optionally '+'-prefixed."""
        signup["contact_number"] = number

        with pytest.raises(ConstraintViolation):
            create_user(test_db, signup)

    @pytest.mark.parametrize("number", ["0631234567", "+27712345678"])
    def test_valid_contact_numbers(self, test_db, signup, number):
        """Test the two accepted contact number shapes."""
        signup["contact_number"] = number

        assert create_user(test_db, signup).contact_number == number

    def test_invalid_email_rejected(self, test_db, signup):
        """Test that malformed emails fail validation."""
        signup["email"] = "not-an-email"

        with pytest.raises(ConstraintViolation) as exc_info:
            create_user(test_db, signup)

        fields = [e["field"] for e in exc_info.value.details["validation_errors"]]
        assert "email" in fields

    def test_unknown_location(self, test_db, signup):
        """Test that the location must exist."""
        signup["location_id"] = 999

        with pytest.raises(NotFound):
            create_user(test_db, signup)

        assert _user_count(test_db) == 0


class TestRoles:
    """Tests for role assignment."""

    def test_assign_role(self, test_db, sample_users):
        """Test granting Recipient to a supplier-only user."""
        bob = sample_users[1]
        assign_role(test_db, bob.user_id, "Recipient")

        assert user_roles(test_db, bob.user_id) == {Role.SUPPLIER, Role.RECIPIENT}

    def test_assign_duplicate_role(self, test_db, sample_users):
        """Test that the same role cannot be granted twice."""
        with pytest.raises(ConstraintViolation):
            assign_role(test_db, sample_users[1].user_id, Role.SUPPLIER)

    def test_assign_unknown_role(self, test_db, sample_users):
        """Test that only Supplier and Recipient exist."""
        with pytest.raises(ConstraintViolation):
            assign_role(test_db, sample_users[1].user_id, "Admin")

    def test_assign_role_unknown_user(self, test_db):
        """Test that the user must exist."""
        with pytest.raises(NotFound):
            assign_role(test_db, 123, Role.RECIPIENT)

    def test_revoke_role(self, test_db, sample_users):
        """Test revoking a held role."""
        alice = sample_users[0]
        revoke_role(test_db, alice.user_id, Role.RECIPIENT)

        assert user_roles(test_db, alice.user_id) == {Role.SUPPLIER}

    def test_revoke_role_not_held(self, test_db, sample_users):
        """Test that revoking a role the user lacks raises NotFound."""
        with pytest.raises(NotFound):
            revoke_role(test_db, sample_users[2].user_id, Role.SUPPLIER)


class TestDeleteUser:
    """Tests for user deletion."""

    def test_delete_user_cascades(self, test_db, sample_users, sample_food_items):
        """Test that a user's listings and roles go with them."""
        alice = sample_users[0]
        delete_user(test_db, alice.user_id)

        with pytest.raises(NotFound):
            get_user(test_db, alice.user_id)
        remaining = test_db.scalars(select(FoodItem.food_name).order_by(FoodItem.item_id)).all()
        assert remaining == ["Rice", "Bread"]
        assert test_db.scalars(select(UserRole).where(UserRole.user_id == alice.user_id)).all() == []

    def test_delete_missing_user(self, test_db):
        """Test that deleting an unknown user raises NotFound."""
        with pytest.raises(NotFound):
            delete_user(test_db, 7)
