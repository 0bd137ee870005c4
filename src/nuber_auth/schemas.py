"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    subject
        The identifier the token was issued for (an account id)
    issued_at
        When the token was signed
    expires_at
        Token expiration timestamp, None for non-expiring tokens
    """

    subject: str
    issued_at: datetime | None
    expires_at: datetime | None

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        if self.expires_at is None:
            return False
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
