from enum import Enum


class AccountRole(str, Enum):
    """Roles an account registers with; fixed for the account's lifetime."""

    OWNER = "Owner"
    CLIENT = "Client"
    DELIVERY = "Delivery"
