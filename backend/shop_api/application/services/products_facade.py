"""Application facade for Product operations."""

import logging
from collections.abc import Mapping
from typing import Any

from shop_api.application.interfaces import ProductRepository
from shop_api.application.schemas import ProductCreate, ProductResponse, ProductUpdate
from shop_api.domain.entities import Product
from shop_api.domain.exceptions import EntityNotFoundError

from .partial_update import apply_partial_update, attribute_rule

logger = logging.getLogger(__name__)

DEFAULT_ORDER: dict[str, str] = {"id": "ASC"}

_UPDATABLE_FIELDS = (
    attribute_rule("name"),
    attribute_rule("price"),
)


class ProductsFacade:
    """Orchestrates product CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def find_by(
        self,
        criteria: Mapping[str, Any] | None = None,
        order_by: Mapping[str, str] | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[ProductResponse]:
        products = await self._repository.find_by(
            criteria or {},
            order_by or DEFAULT_ORDER,
            limit=limit,
            offset=offset,
        )
        return [ProductResponse.model_validate(p, from_attributes=True) for p in products]

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[ProductResponse]:
        return await self.find_by({}, DEFAULT_ORDER, limit=limit, offset=offset)

    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> ProductResponse:
        product = await self._repository.find_one_by(criteria, order_by)
        if product is None:
            raise EntityNotFoundError("Product", criteria=criteria)
        return ProductResponse.model_validate(product, from_attributes=True)

    async def find_one(self, product_id: int) -> ProductResponse:
        return await self.find_one_by({"id": product_id})

    async def create(self, data: ProductCreate) -> Product:
        product = Product(name=data.name, price=data.price)
        product = await self._repository.create(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update(self, product_id: int, data: ProductUpdate) -> Product:
        """Apply the supplied fields of ``data``; write only if something changed."""
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        if not apply_partial_update(product, data, _UPDATABLE_FIELDS):
            logger.debug("Product %s unchanged — skipping write", product_id)
            return product

        product.touch()
        changed = sorted(product.changed_fields)
        product = await self._repository.update(product)
        logger.info("Updated product %s: %s", product_id, ", ".join(changed))
        return product

    async def delete(self, product_id: int) -> bool:
        exists = await self._repository.get_by_id(product_id)
        if exists is None:
            raise EntityNotFoundError("Product", product_id)
        if not await self._repository.delete(product_id):
            raise EntityNotFoundError("Product", product_id)
        logger.info("Deleted product %s", product_id)
        return True
