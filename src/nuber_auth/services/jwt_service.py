"""JWT token service.

Signs a subject identifier into an opaque bearer token and verifies
such tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt

from nuber_auth.exceptions import InvalidTokenError
from nuber_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry the subject identifier in the ``sub`` claim. Callers
    should treat them as opaque strings; no other claim is part of the
    contract.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(account_id)
    >>> service.verify(token) == str(account_id)
    True
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_hours: int | None = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_hours
            Hours until an issued token expires (default 24). ``None``
            issues tokens without an ``exp`` claim; zero or negative
            values are rejected.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        if expire_hours is not None and expire_hours <= 0:
            msg = f"Token lifetime must be positive, got {expire_hours} hours"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = (
            timedelta(hours=expire_hours) if expire_hours is not None else None
        )

    def issue(self, subject_id: object, expires_delta: timedelta | None = None) -> str:
        """Create a signed token for the given subject.

        Parameters
        ----------
        subject_id
            The identifier to encode (stored as its string form)
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload: dict[str, object] = {"sub": str(subject_id), "iat": now}

        expire = expires_delta or self._expire
        if expire is not None:
            payload["exp"] = now + expire

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> str:
        """Verify a token and return its subject identifier.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        return self.decode(token).subject

    def decode(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub"]},
            )

            subject = payload["sub"]
            if not isinstance(subject, str) or not subject:
                msg = "subject must be a non-empty string"
                raise ValueError(msg)

            return TokenPayload(
                subject=subject,
                issued_at=self._timestamp(payload.get("iat")),
                expires_at=self._timestamp(payload.get("exp")),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    @staticmethod
    def _timestamp(value: object) -> datetime | None:
        if value is None:
            return None
        return datetime.fromtimestamp(float(value), tz=timezone.utc)  # type: ignore[arg-type]
