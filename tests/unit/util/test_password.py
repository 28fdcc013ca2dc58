"""Unit tests for password hashing."""

from curbside.util.password import hash_password, verify_password


def test_hash_verifies_only_original_password():
    """The hash matches the original password and nothing else."""
    password_hash = hash_password("hunter22")

    assert password_hash != "hunter22"
    assert verify_password(password_hash, "hunter22") is True
    assert verify_password(password_hash, "hunter23") is False


def test_hashes_are_salted():
    """Hashing the same password twice gives different hashes."""
    assert hash_password("hunter22") != hash_password("hunter22")
