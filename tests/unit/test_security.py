"""
Unit tests for password hashing and access tokens.
Run with: python -m pytest tests/unit/test_security.py
"""
import pytest

from app.core.security import hash_password, verify_password, create_access_token, verify_access_token


@pytest.mark.unit
def test_password_hashing():
    hashed = hash_password("test_password_123")

    assert hashed != "test_password_123"
    assert verify_password("test_password_123", hashed)
    assert not verify_password("wrong_password", hashed)


@pytest.mark.unit
def test_password_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


@pytest.mark.unit
def test_verify_password_rejects_malformed_hash():
    assert not verify_password("anything", "not-a-hash")


@pytest.mark.unit
def test_token_carries_login():
    token = create_access_token("jdoe")
    payload = verify_access_token(token)

    assert payload is not None
    assert payload["sub"] == "jdoe"


@pytest.mark.unit
def test_expired_token_is_rejected():
    token = create_access_token("jdoe", expires_seconds=-10)
    assert verify_access_token(token) is None


@pytest.mark.unit
def test_tampered_token_is_rejected():
    token = create_access_token("jdoe")
    payload_enc, sig = token.split(".")
    forged = create_access_token("admin").split(".")[0]

    assert verify_access_token(f"{forged}.{sig}") is None
    assert verify_access_token(payload_enc) is None
    assert verify_access_token("garbage.token") is None
    assert verify_access_token("abc.été") is None
