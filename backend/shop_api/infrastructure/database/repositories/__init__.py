from .product_repository import SQLAlchemyProductRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemyUserRepository",
]
