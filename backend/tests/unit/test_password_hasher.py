"""Unit tests for the werkzeug-backed PasswordHasher."""

from shop_api.infrastructure.security.werkzeug_password_hasher import WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable():
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    first = hasher.hash("secret")
    second = hasher.hash("secret")

    assert first != "secret"
    assert first != second
    assert hasher.verify("secret", first)
    assert hasher.verify("secret", second)
    assert not hasher.verify("Secret", first)


def test_verify_rejects_malformed_hash():
    hasher = WerkzeugPasswordHasher()
    assert hasher.verify("secret", "CHANGE_ME") is False
