from .partial_update import PartialUpdate
from .product import ProductCreate, ProductUpdate, ProductResponse
from .user import UserCreate, UserUpdate, UserResponse

__all__ = [
    "PartialUpdate",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
