"""
Ledger operations.

Every mutating function runs as one atomic unit of work on the given session:
it either commits completely or raises a LedgerError with nothing persisted.
"""
from foodconnect.services.locations import (
    create_location, delete_location, get_location, list_locations
)
from foodconnect.services.users import (
    assign_role, create_user, delete_user, get_user, get_user_by_email,
    has_role, revoke_role, user_roles
)
from foodconnect.services.food_items import (
    create_food_item, delete_food_item, get_food_item, list_food_items,
    update_food_item_status
)
from foodconnect.services.requests import (
    create_request, get_request, list_requests, sync_food_item_status,
    update_request_status
)
from foodconnect.services.transactions import (
    complete_transaction, create_transaction, get_transaction,
    get_transaction_for_item, list_transactions, validate_parties
)

__all__ = [
    # Locations
    "create_location", "delete_location", "get_location", "list_locations",

    # Users and roles
    "assign_role", "create_user", "delete_user", "get_user", "get_user_by_email",
    "has_role", "revoke_role", "user_roles",

    # Food items
    "create_food_item", "delete_food_item", "get_food_item", "list_food_items",
    "update_food_item_status",

    # Requests
    "create_request", "get_request", "list_requests", "sync_food_item_status",
    "update_request_status",

    # Transactions
    "complete_transaction", "create_transaction", "get_transaction",
    "get_transaction_for_item", "list_transactions", "validate_parties",
]
