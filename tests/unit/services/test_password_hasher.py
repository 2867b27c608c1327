from taskdesk.app.services.password_hasher import (
    burn_verification,
    hash_password,
    verify_password,
)


def test_hash_then_verify():
    hashed = hash_password("correct horse", rounds=4)

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_hash_uses_fresh_salt():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_default_cost_factor_is_ten():
    hashed = hash_password("secret1")

    # $2b$10$...
    assert hashed.split("$")[2] == "10"


def test_long_passwords_are_not_truncated():
    """Passwords sharing their first 72 bytes must still hash differently"""
    prefix = "x" * 80
    hashed = hash_password(prefix + "a", rounds=4)

    assert verify_password(prefix + "a", hashed)
    assert not verify_password(prefix + "b", hashed)


def test_malformed_hash_verifies_false():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False
    assert verify_password("secret1", "") is False


def test_burn_verification_returns_nothing():
    assert burn_verification("anything") is None
