"""Tests for bcrypt password hashing."""
import pytest

from printbooth.errors import CredentialHashError
from printbooth.services import auth
from printbooth.services.auth import get_password_hash, verify_password


class TestPasswordHashing:

    def test_hash_uses_bcrypt_cost_10(self):
        hashed = get_password_hash("secret")
        assert hashed.startswith("$2b$10$")
        assert hashed != "secret"

    def test_same_password_gets_different_salts(self):
        assert get_password_hash("secret") != get_password_hash("secret")

    def test_verify_accepts_correct_password(self):
        hashed = get_password_hash("correct horse")
        assert verify_password("correct horse", hashed) is True

    def test_verify_rejects_other_password(self):
        hashed = get_password_hash("correct horse")
        assert verify_password("battery staple", hashed) is False

    @pytest.mark.parametrize("plain,hashed", [
        ("", "$2b$10$abcdefghijklmnopqrstuu"),
        ("secret", ""),
        ("secret", "not-a-bcrypt-hash"),
        ("secret", "$2b$10$short"),
    ])
    def test_verify_returns_false_instead_of_raising(self, plain, hashed):
        assert verify_password(plain, hashed) is False

    def test_long_passwords_hash_and_verify(self):
        password = "p" * 100
        assert verify_password(password, get_password_hash(password)) is True

    def test_hash_failure_is_wrapped(self, monkeypatch):
        def broken_gensalt(rounds=12):
            raise OSError("no randomness available")

        monkeypatch.setattr(auth.bcrypt, "gensalt", broken_gensalt)
        with pytest.raises(CredentialHashError):
            get_password_hash("secret")
