"""Unit tests for LineItem."""

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money
from tests.fakes import product


def _item(amount: int = 1) -> LineItem:
    return LineItem(id=1, title="Runner", price=Money.of("100.00"), image="a.jpg", amount=amount)


class TestLineItem:

    def test_from_product_starts_at_one(self):
        item = LineItem.from_product(product(7, title="Trail", price="59.90"))
        assert item.id == 7
        assert item.title == "Trail"
        assert item.price == Money.of("59.90")
        assert item.amount == 1

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _item(0)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _item(-2)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            _item(1.5)

    def test_with_amount_returns_copy(self):
        item = _item(1)
        bumped = item.with_amount(3)
        assert bumped.amount == 3
        assert item.amount == 1
        assert bumped.price == item.price

    def test_subtotal(self):
        assert _item(3).subtotal == Money.of("300.00")
