"""Tagged results returned by the account operations.

Every public operation returns exactly one of two shapes: ``Ok`` carrying
an optional payload, or ``Err`` carrying a human-readable message. The
``ok`` flag is fixed by the type, so callers can branch on either
``result.ok`` or ``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, TypeVar, Union

if TYPE_CHECKING:
    from nuber_identity.domain.account import Account

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome with an optional payload."""

    value: T = None  # type: ignore[assignment]

    @property
    def ok(self) -> Literal[True]:
        return True

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Err:
    """Failed outcome with the message shown to the caller."""

    error: str

    @property
    def ok(self) -> Literal[False]:
        return False


Result = Union[Ok[T], Err]

RegisterResult = Union[Ok[None], Err]
AuthResult = Union[Ok[str], Err]
ProfileResult = Union[Ok["Account"], Err]
EditResult = Union[Ok[None], Err]
RedeemResult = Union[Ok[None], Err]
