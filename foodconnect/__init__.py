"""FoodConnect ledger: surplus food listings, requests and transactions."""

__version__ = "1.0.0"
