"""Application facade for User operations."""

import logging
from collections.abc import Mapping
from typing import Any

from shop_api.application.interfaces import PasswordHasher, UserRepository
from shop_api.application.schemas import UserCreate, UserResponse, UserUpdate
from shop_api.domain.entities import User
from shop_api.domain.exceptions import EntityNotFoundError, InvalidStateError

from .partial_update import FieldRule, apply_partial_update, attribute_rule

logger = logging.getLogger(__name__)

DEFAULT_ORDER: dict[str, str] = {"id": "ASC"}


class UsersFacade:
    """Orchestrates user CRUD logic with partial-update support.

    Password comparison and hashing go through the injected PasswordHasher,
    so the stored value is never compared against plaintext directly.
    """

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self._repository = repository
        self._hasher = hasher
        self._updatable_fields = (
            attribute_rule("name"),
            attribute_rule("surname"),
            attribute_rule("username"),
            attribute_rule("email"),
            FieldRule(
                name="password",
                is_same=lambda user, plaintext: user.password_matches(plaintext, self._hasher),
                apply=lambda user, plaintext: user.change_password(plaintext, self._hasher),
            ),
        )

    async def find_by(
        self,
        criteria: Mapping[str, Any] | None = None,
        order_by: Mapping[str, str] | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[UserResponse]:
        users = await self._repository.find_by(
            criteria or {},
            order_by or DEFAULT_ORDER,
            limit=limit,
            offset=offset,
        )
        return [UserResponse.model_validate(u, from_attributes=True) for u in users]

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[UserResponse]:
        return await self.find_by({}, DEFAULT_ORDER, limit=limit, offset=offset)

    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> UserResponse:
        user = await self._repository.find_one_by(criteria, order_by)
        if user is None:
            raise EntityNotFoundError("User", criteria=criteria)
        return UserResponse.model_validate(user, from_attributes=True)

    async def find_one(self, user_id: int) -> UserResponse:
        return await self.find_one_by({"id": user_id})

    async def create(self, data: UserCreate) -> User:
        if data.password is None:
            raise InvalidStateError("Password cannot be null")

        user = User(
            name=data.name,
            surname=data.surname,
            email=data.email,
            username=data.username,
            password_hash=self._hasher.hash(data.password),
        )
        user = await self._repository.create(user)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    async def update(self, user_id: int, data: UserUpdate) -> User:
        """Apply the supplied fields of ``data``; write only if something changed."""
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        if not apply_partial_update(user, data, self._updatable_fields):
            logger.debug("User %s unchanged — skipping write", user_id)
            return user

        user.touch()
        changed = sorted(user.changed_fields)
        user = await self._repository.update(user)
        logger.info("Updated user %s: %s", user_id, ", ".join(changed))
        return user

    async def delete(self, user_id: int) -> bool:
        exists = await self._repository.get_by_id(user_id)
        if exists is None:
            raise EntityNotFoundError("User", user_id)
        if not await self._repository.delete(user_id):
            raise EntityNotFoundError("User", user_id)
        logger.info("Deleted user %s", user_id)
        return True
