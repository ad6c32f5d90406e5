"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from shop_api.domain.entities import Product


class ProductRepository(ABC):
    """Port for product persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Retrieve a single product by its ID."""
        ...

    @abstractmethod
    async def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str],
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        """Retrieve products matching ``criteria`` (column → value equality)."""
        ...

    @abstractmethod
    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> Product | None:
        """Retrieve the first product matching ``criteria``, if any."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Write the current state of an existing product."""
        ...

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """Delete a product. Returns True if deleted, False if not found."""
        ...
