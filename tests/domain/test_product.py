"""Unit tests for the Product entity."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import InvalidPriceError, InvalidQuantityError
from ims.domain.model.product import Product, ProductPage
from ims.domain.model.value_objects import Money


class TestProductCreate:

    def test_quantity_defaults_to_zero(self):
        product = Product.create(name="Widget", price="1.00")
        assert product.quantity == 0
        assert product.id is None

    def test_price_kept_exact(self):
        product = Product.create(name="Widget", price="19.99", quantity=3)
        assert product.price.amount == Decimal("19.99")

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Product.create(name="Widget", price="1", quantity=-1)

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidPriceError):
            Product.create(name="Widget", price="-0.01")

    def test_quantity_checked_before_price(self):
        with pytest.raises(InvalidQuantityError):
            Product.create(name="Widget", price="-1", quantity=-1)


class TestProductUpdateQuantity:

    def test_only_quantity_changes(self):
        product = Product(id=7, name="Widget", quantity=1, price=Money.of("2.50"))
        product.update_quantity(9)
        assert product == Product(id=7, name="Widget", quantity=9, price=Money.of("2.50"))

    def test_negative_rejected_and_state_kept(self):
        product = Product(id=7, name="Widget", quantity=1, price=Money.of("2.50"))
        with pytest.raises(InvalidQuantityError):
            product.update_quantity(-3)
        assert product.quantity == 1

    def test_in_stock(self):
        product = Product(id=1, name="Widget", quantity=0, price=Money.of("1"))
        assert not product.in_stock
        product.update_quantity(1)
        assert product.in_stock


class TestProductPage:

    def test_total_pages_rounds_up(self):
        assert ProductPage(items=[], page=0, size=10, total=21).total_pages == 3

    def test_empty(self):
        assert ProductPage(items=[], page=0, size=10, total=0).total_pages == 0
