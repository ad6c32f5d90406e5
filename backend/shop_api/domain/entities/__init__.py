from .change_tracked import ChangeTracked
from .product import Product
from .user import (
    APIKEY_LENGTH,
    ROLE_ADMIN,
    ROLE_USER,
    ROLES,
    User,
    UserState,
    generate_apikey,
)

__all__ = [
    "ChangeTracked",
    "Product",
    "User",
    "UserState",
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLES",
    "APIKEY_LENGTH",
    "generate_apikey",
]
