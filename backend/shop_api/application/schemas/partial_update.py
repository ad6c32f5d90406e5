"""Base DTO for partial (PATCH-style) updates.

Pydantic already records which fields a caller supplied in
``model_fields_set``; this base exposes that record through a small
explicit API so that "not supplied" and "supplied as null" stay distinct
all the way to the facade.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from shop_api.domain.exceptions import InvalidArgumentError


class PartialUpdate(BaseModel):
    """Field container that remembers which fields were explicitly supplied."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def set(self, field: str, value: Any) -> None:
        """Assign ``value`` to ``field`` and mark it as supplied. ``None`` is allowed."""
        if field not in type(self).model_fields:
            raise InvalidArgumentError(f"{type(self).__name__} has no field '{field}'")
        setattr(self, field, value)
        self.model_fields_set.add(field)

    def was_set(self, field: str) -> bool:
        return field in self.model_fields_set

    def get(self, field: str) -> Any:
        """Return the supplied value, or None if ``field`` was never supplied."""
        if not self.was_set(field):
            return None
        return getattr(self, field)
