"""Concrete repository implementation for User backed by SQLAlchemy."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.application.interfaces import UserRepository
from shop_api.domain.entities import User, UserState
from shop_api.infrastructure.database.models import UserModel

from .query_options import apply_query_options

# Entity attribute → column name, where they differ.
_COLUMN_ALIASES = {"password_hash": "password"}


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            name=model.name,
            surname=model.surname,
            email=model.email,
            username=model.username,
            password_hash=model.password,
            role=model.role,
            state=UserState(model.state),
            apikey=model.apikey,
            last_logged_at=model.last_logged_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            name=entity.name,
            surname=entity.surname,
            email=entity.email,
            username=entity.username,
            password=entity.password_hash,
            role=entity.role,
            state=int(entity.state),
            apikey=entity.apikey,
            last_logged_at=entity.last_logged_at,
            created_at=entity.created_at,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str],
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]:
        stmt = apply_query_options(
            select(UserModel),
            UserModel,
            criteria,
            order_by,
            limit=limit,
            offset=offset,
            column_aliases=_COLUMN_ALIASES,
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> User | None:
        stmt = apply_query_options(
            select(UserModel),
            UserModel,
            criteria,
            order_by,
            limit=1,
            column_aliases=_COLUMN_ALIASES,
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise ValueError(f"User {user.id} not found in database")
        model.name = user.name
        model.surname = user.surname
        model.email = user.email
        model.username = user.username
        model.password = user.password_hash
        model.role = user.role
        model.state = int(user.state)
        model.apikey = user.apikey
        model.last_logged_at = user.last_logged_at
        model.updated_at = user.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, user_id: int) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
