"""Domain-specific exceptions — framework-independent."""

from collections.abc import Mapping
from typing import Any


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist.

    Lookups by id report the id; lookups by other criteria report the
    criteria they were given.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: int | str | None = None,
        *,
        criteria: Mapping[str, Any] | None = None,
    ):
        if criteria is not None and set(criteria) == {"id"}:
            entity_id, criteria = criteria["id"], None
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.criteria = dict(criteria) if criteria is not None else {"id": entity_id}
        if criteria is None:
            message = f"{entity_type} with id '{entity_id}' not found"
        else:
            message = f"{entity_type} matching {self.criteria!r} not found"
        super().__init__(message)


class InvalidArgumentError(Exception):
    """Raised when a value falls outside a closed set of allowed values."""


class InvalidStateError(Exception):
    """Raised when a precondition required by an operation is missing."""
