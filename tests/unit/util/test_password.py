"""Unit tests for password hashing."""

from forum.util.password import hash_password, verify_password


def test_hash_verifies():
    password_hash = hash_password("correct horse", rounds=4)

    assert verify_password("correct horse", password_hash)
    assert not verify_password("battery staple", password_hash)


def test_hashes_are_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_malformed_hash_does_not_verify():
    assert not verify_password("anything", "not-a-bcrypt-hash")
