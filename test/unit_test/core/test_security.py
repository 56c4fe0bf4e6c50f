"""Unit tests for bcrypt password hashing."""

import pytest

from homeharbor.core.security import MAX_PASSWORD_BYTES, check_password_length, hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("password123", rounds=4)

    assert hashed != "password123"
    assert hashed.startswith("$2")
    assert verify_password("password123", hashed)
    assert not verify_password("wrong-password", hashed)


def test_hashes_are_salted():
    assert hash_password("admin123", rounds=4) != hash_password("admin123", rounds=4)


def test_missing_hash_never_verifies():
    assert verify_password("anything", None) is False
    assert verify_password("anything", "") is False


def test_malformed_hash_does_not_raise():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_length_limit_counts_utf8_bytes():
    assert check_password_length("x" * MAX_PASSWORD_BYTES) == "x" * MAX_PASSWORD_BYTES
    with pytest.raises(ValueError, match="72 bytes"):
        # 25 characters, 75 bytes
        check_password_length("力" * 25)


def test_hash_rejects_oversized_password():
    with pytest.raises(ValueError):
        hash_password("x" * 80, rounds=4)
