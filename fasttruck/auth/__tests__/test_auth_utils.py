"""
Unit tests for password hashing and JWT helpers.

Run: python3 -m pytest fasttruck/auth/__tests__/test_auth_utils.py -v
"""
from datetime import timedelta

from jose import jwt

from fasttruck.auth.utils import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from fasttruck.config.settings import settings


class TestPasswordHashing:

    def test_round_trip(self):
        stored = hash_password("secret123")

        assert stored.startswith("pbkdf2_sha256$")
        assert verify_password("secret123", stored)
        assert not verify_password("secret124", stored)

    def test_salt_makes_hashes_differ(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_fixed_salt_is_deterministic(self):
        assert hash_password("secret123", salt="abc") == hash_password("secret123", salt="abc")

    def test_malformed_stored_hash(self):
        assert not verify_password("secret123", "not-a-hash")
        assert not verify_password("secret123", "md5$1$salt$digest")
        assert not verify_password("secret123", "pbkdf2_sha256$many$salt$digest")


class TestAccessToken:

    def test_encode_decode(self):
        token = create_access_token({"sub": "user-1", "role": "client"})

        payload = decode_access_token(token)

        assert payload["sub"] == "user-1"
        assert payload["role"] == "client"
        assert payload["jti"]
        assert "exp" in payload

    def test_each_token_has_unique_jti(self):
        one = decode_access_token(create_access_token({"sub": "user-1"}))
        two = decode_access_token(create_access_token({"sub": "user-1"}))

        assert one["jti"] != two["jti"]

    def test_expired_token(self):
        token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-10))

        assert decode_access_token(token) is None

    def test_wrong_signature(self):
        token = jwt.encode({"sub": "user-1"}, "other-secret", algorithm=settings.ALGORITHM)

        assert decode_access_token(token) is None

    def test_garbage(self):
        assert decode_access_token("garbage") is None
