"""PasswordHasher adapter backed by werkzeug.security."""

from werkzeug.security import check_password_hash, generate_password_hash

from shop_api.application.interfaces import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing via werkzeug (scrypt by default)."""

    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self._method)

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return check_password_hash(hashed, plaintext)
        except ValueError:
            # Malformed or unsupported hash string (e.g. a placeholder value)
            return False
