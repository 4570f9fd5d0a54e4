"""
Tests for JWT issuance / verification and bcrypt hashing.
"""

from unittest.mock import patch

import bcrypt
import pytest
from jose import jwt

from auth.jwt import create_token, decode_token
from auth.password import hash_password, verify_password
from config.settings import config
from core.errors import AuthenticationError, ValidationError


class TestTokens:
    def test_round_trip_returns_user_id(self):
        assert decode_token(create_token("abc-123")) == "abc-123"

    def test_expiry_is_one_hour(self):
        claims = jwt.get_unverified_claims(create_token("abc"))
        assert claims["exp"] - claims["iat"] == 3600

    def test_expired_token_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_token(create_token("abc", expires_in=-1))

    def test_wrong_secret_rejected(self):
        forged = jwt.encode({"sub": "abc"}, "another-secret", algorithm=config.jwt_algorithm)
        with pytest.raises(AuthenticationError):
            decode_token(forged)

    def test_missing_subject_rejected(self):
        token = jwt.encode({"foo": "bar"}, config.jwt_secret, algorithm=config.jwt_algorithm)
        with pytest.raises(AuthenticationError):
            decode_token(token)

    def test_error_message_is_generic(self):
        with pytest.raises(AuthenticationError) as info:
            decode_token("garbage")
        assert info.value.message == "Invalid or expired token"


class TestPasswords:
    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("s3cret-pass", rounds=4)
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)

    def test_wrong_password_fails(self):
        hashed = hash_password("s3cret-pass", rounds=4)
        assert not verify_password("other-pass", hashed)

    def test_salted(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_over_72_bytes_raises_validation_error(self):
        with pytest.raises(ValidationError):
            hash_password("é" * 37, rounds=4)

    def test_over_72_bytes_never_verifies(self):
        hashed = hash_password("p" * 72, rounds=4)
        assert verify_password("p" * 73, hashed) is False

    def test_explicit_rounds_override_config(self):
        with patch("auth.password.bcrypt.gensalt", wraps=bcrypt.gensalt) as gensalt:
            hash_password("s3cret-pass", rounds=5)
        gensalt.assert_called_once_with(rounds=5)

    def test_zero_rounds_passed_through(self):
        with patch("auth.password.bcrypt.gensalt", side_effect=ValueError("invalid rounds")) as gensalt:
            with pytest.raises(ValueError):
                hash_password("s3cret-pass", rounds=0)
        gensalt.assert_called_once_with(rounds=0)
