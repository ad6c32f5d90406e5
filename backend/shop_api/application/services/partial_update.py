"""Partial-update algorithm shared by the resource facades.

A request field is applied to an entity only when it was explicitly
supplied, is not null, and differs from the entity's current value.
Untouched entities stay clean, so callers can skip the write entirely.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from shop_api.application.schemas.partial_update import PartialUpdate
from shop_api.domain.entities import ChangeTracked


@dataclass(frozen=True)
class FieldRule:
    """How one mutable field is compared against, and written to, an entity."""

    name: str
    is_same: Callable[[Any, Any], bool]
    apply: Callable[[Any, Any], None]


def attribute_rule(name: str, setter: str | None = None) -> FieldRule:
    """Rule for a plain attribute compared with ``==`` and written via ``set_<name>``."""
    setter_name = setter or f"set_{name}"
    return FieldRule(
        name=name,
        is_same=lambda entity, value: getattr(entity, name) == value,
        apply=lambda entity, value: getattr(entity, setter_name)(value),
    )


def apply_partial_update(
    entity: ChangeTracked,
    request: PartialUpdate,
    rules: Iterable[FieldRule],
) -> bool:
    """Apply supplied, non-null, differing request fields to ``entity``.

    Returns whether the entity now has unsaved changes.
    """
    for rule in rules:
        if not request.was_set(rule.name):
            continue
        value = request.get(rule.name)
        # Explicit null is a no-op, not "clear the field".
        if value is None:
            continue
        if rule.is_same(entity, value):
            continue
        rule.apply(entity, value)
    return entity.is_changed()
