"""Account aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any, Union
from uuid import UUID, uuid4

from nuber_identity.domain.account.exceptions import AccountFieldNotLoadedError
from nuber_identity.domain.account.value_objects import AccountRole, Email
from nuber_identity.domain.shared.time import utc_now

if TYPE_CHECKING:
    from nuber_auth import PasswordHashingService

ACCOUNT_FIELDS = frozenset(
    {"id", "email", "password_hash", "role", "verified", "created_at", "updated_at"},
)

# Minimal projection needed to check a login
CREDENTIAL_FIELDS = ("id", "password_hash")


class Account:
    """
    Account aggregate root.

    Holds the identity (email, role), the password hash and the email
    verification flag. Instances are never mutated after construction:
    every change returns a new Account which is then saved in one call.

    An Account read through a field projection only carries the requested
    fields; reading any other field raises AccountFieldNotLoadedError.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email, None],
        password_hash: str | None,
        role: Union[str, AccountRole, None] = AccountRole.CLIENT,
        verified: bool | None = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        loaded_fields: Iterable[str] | None = None,
    ):
        self._id = id or uuid4()
        self._loaded = (
            ACCOUNT_FIELDS
            if loaded_fields is None
            else frozenset(loaded_fields) | {"id"}
        )
        unknown = self._loaded - ACCOUNT_FIELDS
        if unknown:
            msg = f"Unknown account fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        self._email = self._coerce_email(email) if "email" in self._loaded else None
        self._password_hash = password_hash
        self._role = self._coerce_role(role) if "role" in self._loaded else None
        self._verified = bool(verified)
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @staticmethod
    def _coerce_email(email: Union[str, Email, None]) -> Email:
        if isinstance(email, Email):
            return email
        return Email(email or "")

    @staticmethod
    def _coerce_role(role: Union[str, AccountRole, None]) -> AccountRole:
        return role if isinstance(role, AccountRole) else AccountRole(role)

    def _field(self, name: str) -> Any:
        if name not in self._loaded:
            raise AccountFieldNotLoadedError(name)
        return getattr(self, f"_{name}")

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._field("email").value

    @property
    def email_obj(self) -> Email:
        return self._field("email")

    @property
    def password_hash(self) -> str:
        return self._field("password_hash")

    @property
    def role(self) -> AccountRole:
        return self._field("role")

    @property
    def verified(self) -> bool:
        return self._field("verified")

    @property
    def created_at(self) -> datetime:
        return self._field("created_at")

    @property
    def updated_at(self) -> datetime:
        return self._field("updated_at")

    @property
    def loaded_fields(self) -> frozenset[str]:
        return self._loaded

    @property
    def is_partial(self) -> bool:
        return self._loaded != ACCOUNT_FIELDS

    def has_email(self, email: Union[str, Email]) -> bool:
        """Compare against an address after normalization."""
        candidate = email if isinstance(email, Email) else Email(email)
        return candidate == self.email_obj

    def check_password(
        self,
        password: str,
        password_service: PasswordHashingService,
    ) -> bool:
        return password_service.verify(password, self.password_hash)

    def with_email(self, email: Union[str, Email]) -> Account:
        """Return a copy with a new email; the copy is no longer verified."""
        return self._replace(email=self._coerce_email(email), verified=False)

    def with_password(
        self,
        password: str,
        password_service: PasswordHashingService,
    ) -> Account:
        """Return a copy whose password hash is derived from ``password``."""
        return self._replace(password_hash=password_service.hash(password))

    def mark_verified(self) -> Account:
        return self._replace(verified=True)

    def _replace(self, **changes: Any) -> Account:
        if self.is_partial:
            msg = "Cannot derive an updated account from a partial fetch"
            raise ValueError(msg)
        values = {
            "id": self._id,
            "email": self._email,
            "password_hash": self._password_hash,
            "role": self._role,
            "verified": self._verified,
            "created_at": self._created_at,
            "updated_at": utc_now(),
        }
        values.update(changes)
        return Account(**values)

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password: str,
        role: Union[str, AccountRole],
        password_service: PasswordHashingService,
    ) -> Account:
        """Build a new, unverified account, hashing the password."""
        email_obj = cls._coerce_email(email)
        role_value = cls._coerce_role(role)
        return cls(
            email=email_obj,
            password_hash=password_service.hash(password),
            role=role_value,
            verified=False,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, AccountRole],
        verified: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> Account:
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            verified=verified,
            created_at=created_at,
            updated_at=updated_at,
        )

    @classmethod
    def reconstitute_partial(cls, fields: Iterable[str], **values: Any) -> Account:
        """Rebuild an Account from a column projection."""
        loaded = frozenset(fields) | {"id"}
        return cls(
            id=values["id"],
            email=values.get("email"),
            password_hash=values.get("password_hash"),
            role=values.get("role"),
            verified=values.get("verified"),
            created_at=values.get("created_at"),
            updated_at=values.get("updated_at"),
            loaded_fields=loaded,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        email = self._email.value if self._email else "<not loaded>"
        return f"Account(id={self._id}, email={email})"
