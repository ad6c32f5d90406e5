"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.config import get_settings
from shop_api.application.interfaces import PasswordHasher
from shop_api.application.services import ProductsFacade, UsersFacade
from shop_api.infrastructure.database.session import get_db_session
from shop_api.infrastructure.database.repositories import (
    SQLAlchemyProductRepository,
    SQLAlchemyUserRepository,
)
from shop_api.infrastructure.security.werkzeug_password_hasher import WerkzeugPasswordHasher


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Shared hasher configured from settings."""
    return WerkzeugPasswordHasher(method=get_settings().password_hash_method)


async def get_products_facade(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductsFacade, None]:
    """Provides a ProductsFacade instance with its repository wired up."""
    repository = SQLAlchemyProductRepository(session)
    yield ProductsFacade(repository)


async def get_users_facade(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[UsersFacade, None]:
    """Provides a UsersFacade with its repository and password hasher wired up."""
    repository = SQLAlchemyUserRepository(session)
    yield UsersFacade(repository, hasher)
