from .product import ProductModel
from .user import UserModel

__all__ = [
    "ProductModel",
    "UserModel",
]
