from nuber_identity.domain.account.repositories.account_repository import (
    AccountRepository,
)
from nuber_identity.domain.account.repositories.verification_repository import (
    VerificationRepository,
)

__all__ = ["AccountRepository", "VerificationRepository"]
