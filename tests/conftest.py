"""Shared test fixtures for all tests."""
import os

# Cheap hashes for tests; must be set before settings are read
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from datetime import date
from decimal import Decimal

from foodconnect.core.database import build_engine, build_session_factory, drop_db, init_db
from foodconnect.models import FoodItem, Location, Request, User, UserRole


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite engine with the ledger schema."""
    engine = build_engine("sqlite://")
    init_db(engine)
    try:
        yield engine
    finally:
        drop_db(engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_db(engine):
    """Session bound to the in-memory database for each test."""
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def sample_locations(test_db):
    """Create the three demo locations."""
    locations = [
        Location(province="Western Cape", city="Cape Town", zip_code="8001", street_address="123 Long Street"),
        Location(province="Gauteng", city="Johannesburg", zip_code="2001", street_address="456 Main Road"),
        Location(province="KwaZulu-Natal", city="Durban", zip_code="4001", street_address="789 Beachfront Avenue"),
    ]
    for loc in locations:
        test_db.add(loc)
    test_db.commit()
    return locations


@pytest.fixture
def sample_users(test_db, sample_locations):
    """
    Create four users with roles:
    alice (Supplier, Recipient), bob (Supplier), carol (Recipient), david (Supplier, Recipient).
    """
    users = [
        User(user_fullname="Alice Smith", occupation="Restaurant", location_id=sample_locations[0].location_id,
             contact_number="0631234567", email="alice@example.com", password="hashed_password_1"),
        User(user_fullname="Bob Johnson", occupation="Grocery Store", location_id=sample_locations[1].location_id,
             contact_number="+27712345678", email="bob@example.com", password="hashed_password_2"),
        User(user_fullname="Carol White", occupation="", location_id=sample_locations[2].location_id,
             contact_number="0823456789", email="carol@example.com", password="hashed_password_3"),
        User(user_fullname="David Brown", occupation="Bakery", location_id=sample_locations[0].location_id,
             contact_number="+27609876543", email="david@example.com", password="hashed_password_4"),
    ]
    for user in users:
        test_db.add(user)
    test_db.commit()

    roles = [
        (users[0], "Supplier"),
        (users[0], "Recipient"),
        (users[1], "Supplier"),
        (users[2], "Recipient"),
        (users[3], "Supplier"),
        (users[3], "Recipient"),
    ]
    for user, role in roles:
        test_db.add(UserRole(user_id=user.user_id, role=role))
    test_db.commit()
    return users


@pytest.fixture
def sample_food_items(test_db, sample_users):
    """
    Create four listings: Carrots and Apples (alice), Rice (bob, Selected), Bread (david).
    """
    alice, bob, _carol, david = sample_users
    items = [
        FoodItem(user_id=alice.user_id, food_type="Vegetables", food_name="Carrots",
                 quantity_available=Decimal("10.0"), expiry_date=date(2025, 11, 15),
                 delivery_option="Pickup", location_id=alice.location_id, description="Fresh carrots"),
        FoodItem(user_id=alice.user_id, food_type="Fruits", food_name="Apples",
                 quantity_available=Decimal("8.0"), expiry_date=date(2025, 11, 10),
                 delivery_option="Delivery", location_id=alice.location_id, description="Locally grown apples"),
        FoodItem(user_id=bob.user_id, food_type="Grains", food_name="Rice",
                 quantity_available=Decimal("20.0"), expiry_date=date(2026, 1, 1),
                 delivery_option="Pickup", location_id=bob.location_id, description="2kg rice bags, sealed",
                 status="Selected"),
        FoodItem(user_id=david.user_id, food_type="Bakery", food_name="Bread",
                 quantity_available=Decimal("6.0"), expiry_date=date(2025, 11, 5),
                 delivery_option="Delivery", location_id=david.location_id, description="Freshly baked loaves"),
    ]
    for item in items:
        test_db.add(item)
    test_db.commit()
    return items


@pytest.fixture
def selected_rice_request(test_db, sample_users, sample_food_items):
    """Carol's Selected request for 10 units of Rice."""
    carol = sample_users[2]
    rice = sample_food_items[2]
    request = Request(
        item_id=rice.item_id,
        recipient_id=carol.user_id,
        quantity_needed=Decimal("10.0"),
        status="Selected"
    )
    test_db.add(request)
    test_db.commit()
    return request
