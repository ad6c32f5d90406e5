"""Translate criteria / ordering mappings into SQLAlchemy select clauses."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select

from shop_api.domain.exceptions import InvalidArgumentError
from shop_api.infrastructure.database.base import Base

_DIRECTIONS = {"ASC", "DESC"}


def _column(model: type[Base], name: str, column_aliases: Mapping[str, str]):
    column_name = column_aliases.get(name, name)
    column = model.__table__.columns.get(column_name)
    if column is None:
        raise InvalidArgumentError(f"Unknown {model.__tablename__} column '{name}'")
    return getattr(model, column.key)


def apply_query_options(
    stmt: Select,
    model: type[Base],
    criteria: Mapping[str, Any],
    order_by: Mapping[str, str] | None,
    *,
    limit: int | None = None,
    offset: int = 0,
    column_aliases: Mapping[str, str] | None = None,
) -> Select:
    """Add equality filters, ordering and paging to ``stmt``.

    ``column_aliases`` maps entity attribute names to column names where the
    two differ (e.g. ``password_hash`` → ``password``).
    """
    aliases = column_aliases or {}
    for name, value in criteria.items():
        stmt = stmt.where(_column(model, name, aliases) == value)

    for name, direction in (order_by or {}).items():
        direction = direction.upper()
        if direction not in _DIRECTIONS:
            raise InvalidArgumentError(f"Unsupported order direction '{direction}'")
        column = _column(model, name, aliases)
        stmt = stmt.order_by(column.asc() if direction == "ASC" else column.desc())

    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt
