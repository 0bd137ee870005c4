"""Verification code generation.

Codes are one-time capabilities stored in plain text on a Verification
record; they are already unguessable, so no hashing is applied.
"""

from uuid import uuid4


class VerificationCodeGenerator:
    """Issues random verification codes.

    Each code is a version 4 UUID in its canonical text form (122 random
    bits from the operating system's CSPRNG).
    """

    def generate(self) -> str:
        return str(uuid4())
