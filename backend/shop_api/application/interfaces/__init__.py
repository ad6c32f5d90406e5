from .password_hasher import PasswordHasher
from .product_repository import ProductRepository
from .user_repository import UserRepository

__all__ = [
    "PasswordHasher",
    "ProductRepository",
    "UserRepository",
]
