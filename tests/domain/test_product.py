"""Unit tests for the Product model."""

import pytest

from shophub.domain.exceptions import ValidationError
from shophub.domain.model.product import Product
from shophub.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProduct:

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(id="1", title="Bag", price=Money.of("1"), stock=-1)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id="1", title="Bag", price=Money.of("1"), stock=2.5)

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            Product(id="", title="Bag", price=Money.of("1"), stock=1)

    def test_zero_stock_is_out_of_stock(self):
        assert make_product(stock=0).is_out_of_stock
        assert not make_product(stock=1).is_out_of_stock

    def test_title_match_is_case_insensitive(self):
        product = make_product(title="Mens Casual Premium Slim Fit T-Shirts")
        assert product.matches("slim FIT")
        assert product.matches("")
        assert not product.matches("jacket")
