"""Core ledger modules: configuration, database and credential hashing."""
