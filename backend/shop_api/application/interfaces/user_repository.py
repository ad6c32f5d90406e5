"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from shop_api.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a single user by its ID."""
        ...

    @abstractmethod
    async def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str],
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]:
        """Retrieve users matching ``criteria`` (column → value equality)."""
        ...

    @abstractmethod
    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> User | None:
        """Retrieve the first user matching ``criteria``, if any."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Write the current state of an existing user."""
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...
