"""SQLAlchemy model for pending email verifications."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nuber_identity.domain.shared.time import utc_now
from nuber_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from nuber_identity.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)


class VerificationModel(IdentityBase):
    """SQLAlchemy model for verification codes.

    One row per account at most; rows disappear with their account.
    """

    __tablename__ = "verifications"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    code: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    # Loaded explicitly with joinedload when the owner is requested
    owner: Mapped[AccountModel] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<VerificationModel(id={self.id}, owner_id={self.owner_id})>"
