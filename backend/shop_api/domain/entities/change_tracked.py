"""Base dataclass for entities that remember which business fields changed."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ChangeTracked:
    """Records the names of business fields mutated since construction.

    A freshly built or freshly loaded instance reports no changes; the
    record is never cleared, so a saved entity is replaced by the one the
    repository returns rather than reset.
    """

    updated_at: datetime | None = field(default=None, kw_only=True)
    _changed_fields: set[str] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    def _mark_changed(self, field_name: str) -> None:
        self._changed_fields.add(field_name)

    def is_changed(self) -> bool:
        """True once any business-field mutator has run on this instance."""
        return bool(self._changed_fields)

    @property
    def changed_fields(self) -> frozenset[str]:
        return frozenset(self._changed_fields)

    def touch(self) -> None:
        """Stamp the update timestamp. Not a business change by itself."""
        self.updated_at = datetime.now(timezone.utc)
