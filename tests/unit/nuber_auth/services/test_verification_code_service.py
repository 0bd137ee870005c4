"""Unit tests for VerificationCodeGenerator."""

from uuid import UUID

from nuber_auth.services import VerificationCodeGenerator


class TestVerificationCodeGenerator:
    def test_generate_returns_uuid4_text(self):
        code = VerificationCodeGenerator().generate()

        assert isinstance(code, str)
        assert UUID(code).version == 4
        assert str(UUID(code)) == code

    def test_codes_are_unique(self):
        generator = VerificationCodeGenerator()

        codes = {generator.generate() for _ in range(1000)}

        assert len(codes) == 1000
