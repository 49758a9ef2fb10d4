"""
Unit tests for swachhta_prahari.core.security
"""
import pytest

from swachhta_prahari.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    create_token_pair,
    decode_jwt_token,
    decode_refresh_token,
    generate_otp,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_hash_not_equal_to_plain(self, mock_settings):
        result = hash_password("secret123")
        assert isinstance(result, str)
        assert result != "secret123"

    def test_different_salts_per_call(self, mock_settings):
        """Each hash should use a new salt, so hashes differ."""
        assert hash_password("same") != hash_password("same")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for access and refresh tokens"""

    def test_create_and_decode(self, mock_settings):
        token = create_jwt_token({"sub": "user-123", "role": "admin"})
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["role"] == "admin"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_pair_uses_separate_secrets(self, mock_settings):
        access, refresh = create_token_pair("user-1", "camera")
        assert decode_refresh_token(refresh)["sub"] == "user-1"
        with pytest.raises(ValueError, match="Invalid token"):
            decode_refresh_token(access)
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(refresh)

    def test_tokens_minted_together_differ(self, mock_settings):
        assert create_jwt_token({"sub": "u"}) != create_jwt_token({"sub": "u"})

    def test_garbage_token(self, mock_settings):
        with pytest.raises(ValueError):
            decode_jwt_token("not.a.jwt")


def test_generate_otp_is_six_digits():
    for _ in range(20):
        otp = generate_otp()
        assert len(otp) == 6
        assert otp.isdigit()
