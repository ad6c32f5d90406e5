"""Abstract one-way password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Port for hashing and verifying secrets — implemented in the infrastructure layer."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return a one-way hash of ``plaintext``."""
        ...

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if ``plaintext`` produces ``hashed``."""
        ...
