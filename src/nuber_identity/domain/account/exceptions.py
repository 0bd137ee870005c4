"""Account domain exceptions.

Custom exceptions for the account domain, used for validation
and business rule violations.
"""


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class AccountNotFoundError(Exception):
    """Account not found."""

    def __init__(self, account_id: object) -> None:
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class AccountFieldNotLoadedError(AttributeError):
    """Raised when reading a field a partial fetch did not load."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Account field was not loaded: {field}")
