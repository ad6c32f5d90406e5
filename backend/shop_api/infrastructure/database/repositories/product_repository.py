"""Concrete repository implementation backed by SQLAlchemy."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.application.interfaces import ProductRepository
from shop_api.domain.entities import Product
from shop_api.infrastructure.database.models import ProductModel

from .query_options import apply_query_options


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map ORM model → domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Map domain entity → ORM model (for creation)."""
        return ProductModel(
            name=entity.name,
            price=entity.price,
            created_at=entity.created_at,
        )

    async def get_by_id(self, product_id: int) -> Product | None:
        result = await self._session.get(ProductModel, product_id)
        return self._to_entity(result) if result else None

    async def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str],
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        stmt = apply_query_options(
            select(ProductModel), ProductModel, criteria, order_by, limit=limit, offset=offset
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> Product | None:
        stmt = apply_query_options(
            select(ProductModel), ProductModel, criteria, order_by, limit=1
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, product: Product) -> Product:
        model = self._to_model(product)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, product: Product) -> Product:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            raise ValueError(f"Product {product.id} not found in database")
        model.name = product.name
        model.price = product.price
        model.updated_at = product.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, product_id: int) -> bool:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
