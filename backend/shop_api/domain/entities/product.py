"""Product domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .change_tracked import ChangeTracked


@dataclass
class Product(ChangeTracked):
    """A sellable item with a name and a unit price."""

    name: str
    price: float
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def set_name(self, name: str) -> None:
        self.name = name
        self._mark_changed("name")

    def set_price(self, price: float) -> None:
        self.price = float(price)
        self._mark_changed("price")
