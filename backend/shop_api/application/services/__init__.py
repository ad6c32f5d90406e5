from .partial_update import FieldRule, apply_partial_update, attribute_rule
from .products_facade import ProductsFacade
from .users_facade import UsersFacade

__all__ = [
    "FieldRule",
    "apply_partial_update",
    "attribute_rule",
    "ProductsFacade",
    "UsersFacade",
]
