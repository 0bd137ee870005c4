"""Unit tests for PasswordHashingService."""

import pytest

from nuber_auth.exceptions import HashingError, WeakPasswordError
from nuber_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_default_work_factor_is_ten(self):
        assert PasswordHashingService().rounds == 10

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("secure_password123")

        # bcrypt hashes start with $2b$ or $2a$ and are 60 characters
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_hash_is_not_the_plaintext(self):
        password = "pw"
        assert self.service.hash(password) != password

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        password = "my_secret_password"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    @pytest.mark.parametrize("password", ["pw", "a", "päss wörd", "x" * 50])
    def test_round_trip(self, password):
        """A hash verifies its own password but not an extended one."""
        assert self.service.verify(password, self.service.hash(password))
        assert not self.service.verify(password, self.service.hash(password + "x"))

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    def test_hash_empty_password_raises(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.hash("")

    def test_verify_malformed_hash_raises(self):
        """A stored value that is not a bcrypt hash is a hashing failure."""
        with pytest.raises(HashingError):
            self.service.verify("password", "not_a_valid_hash")

    def test_verify_empty_hash_raises(self):
        with pytest.raises(HashingError):
            self.service.verify("password", "")


class TestPasswordRehash:
    """Tests for needs_rehash functionality."""

    def test_needs_rehash_same_rounds(self):
        service = PasswordHashingService(rounds=4)
        hashed = service.hash("password123")

        assert service.needs_rehash(hashed) is False

    def test_needs_rehash_different_rounds(self):
        hashed = PasswordHashingService(rounds=4).hash("password123")

        assert PasswordHashingService(rounds=5).needs_rehash(hashed) is True

    def test_needs_rehash_invalid_hash(self):
        service = PasswordHashingService(rounds=4)
        assert service.needs_rehash("invalid_hash") is True
        assert service.needs_rehash("") is True
