"""Application layer: account operations and the authentication boundary."""
