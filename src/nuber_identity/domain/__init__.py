"""Domain layer for account identity and verification."""
