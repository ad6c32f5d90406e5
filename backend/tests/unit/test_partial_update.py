"""Unit tests for the PartialUpdate request model and apply_partial_update."""

import pytest
from pydantic import ValidationError

from shop_api.application.schemas import ProductUpdate, UserUpdate
from shop_api.application.services import FieldRule, apply_partial_update, attribute_rule
from shop_api.domain.entities import Product, User
from shop_api.domain.exceptions import InvalidArgumentError

PRODUCT_RULES = (attribute_rule("name"), attribute_rule("price"))


# ── PartialUpdate ────────────────────────────────────────────────────


def test_fresh_model_has_nothing_set():
    data = UserUpdate()
    for field in ("name", "surname", "email", "username", "password"):
        assert data.was_set(field) is False
        assert data.get(field) is None


def test_set_marks_field_as_supplied():
    data = ProductUpdate()
    data.set("name", "Mug")
    assert data.was_set("name")
    assert data.get("name") == "Mug"
    assert not data.was_set("price")


def test_set_none_is_an_explicit_value():
    data = ProductUpdate()
    data.set("price", None)
    assert data.was_set("price")
    assert data.get("price") is None


def test_parsed_body_tracks_present_keys():
    data = UserUpdate.model_validate({"name": "Ann", "email": None})
    assert data.was_set("name")
    assert data.was_set("email")
    assert not data.was_set("surname")


def test_get_ignores_defaults_of_unsupplied_fields():
    class WithDefault(ProductUpdate):
        name: str | None = "placeholder"

    data = WithDefault()
    assert data.name == "placeholder"
    assert data.get("name") is None


def test_set_unknown_field():
    with pytest.raises(InvalidArgumentError):
        ProductUpdate().set("colour", "red")


def test_set_validates_values():
    data = ProductUpdate()
    with pytest.raises(ValidationError):
        data.set("price", -1)
    with pytest.raises(ValidationError):
        data.set("name", "")


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        ProductUpdate.model_validate({"colour": "red"})


def test_email_shape_is_validated():
    with pytest.raises(ValidationError):
        UserUpdate(email="not-an-email")


# ── apply_partial_update ─────────────────────────────────────────────


def test_omitted_fields_are_never_touched():
    product = Product(name="Mug", price=4.5)
    touched: list[str] = []
    rules = [
        FieldRule(
            name="price",
            is_same=lambda e, v: touched.append("compared") or False,
            apply=lambda e, v: touched.append("applied"),
        )
    ]

    assert apply_partial_update(product, ProductUpdate(), rules) is False
    assert touched == []


def test_explicit_null_is_inert():
    product = Product(name="Mug", price=4.5)
    data = ProductUpdate()
    data.set("name", None)

    assert apply_partial_update(product, data, PRODUCT_RULES) is False
    assert product.name == "Mug"


def test_equal_values_do_not_mark_changed():
    product = Product(name="Mug", price=4.5)
    data = ProductUpdate(name="Mug", price=4.5)

    assert apply_partial_update(product, data, PRODUCT_RULES) is False
    assert product.is_changed() is False


def test_differing_values_are_applied():
    product = Product(name="Mug", price=4.5)
    data = ProductUpdate(price=6.0)

    assert apply_partial_update(product, data, PRODUCT_RULES) is True
    assert product.price == 6.0
    assert product.name == "Mug"
    assert product.changed_fields == {"price"}


def test_string_comparison_is_case_sensitive():
    user = User(
        name="ann", surname="Lee", email="ann@x.io", username="ann", password_hash="x"
    )
    data = UserUpdate(name="Ann")

    assert apply_partial_update(user, data, [attribute_rule("name")]) is True
    assert user.name == "Ann"
