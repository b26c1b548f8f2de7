"""Tests for the Receipt aggregate."""

import pytest

from supermarket.checkout.models import Discount, Product, ProductUnit
from supermarket.checkout.receipt import Receipt

apple = Product("apple", ProductUnit.EACH)
cheese = Product("cheese", ProductUnit.KILO)


@pytest.fixture
def receipt():
    r = Receipt()
    r.add_product(apple, 3, 0.5, 1.5)
    r.add_product(cheese, 0.5, 12.0, 6.0)
    return r


def test_empty_receipt_total():
    r = Receipt()
    assert r.total_price == 0
    assert r.items() == []
    assert r.discounts() == []
    assert r.points_used == 0


def test_total_is_lines_minus_discounts_and_points(receipt):
    receipt.add_discount(Discount(apple, "3 for 2", 0.5))
    receipt.record_points_payment(2)
    assert receipt.total_price == pytest.approx(1.5 + 6.0 - 0.5 - 2)


def test_items_keep_order(receipt):
    assert [i.product.name for i in receipt.items()] == ["apple", "cheese"]
    assert receipt.items()[1].quantity == 0.5
    assert receipt.items()[1].price == 12.0


def test_accessors_return_copies(receipt):
    receipt.add_discount(Discount(apple, "3 for 2", 0.5))
    receipt.items().clear()
    receipt.discounts().append(Discount(apple, "bogus", 100.0))
    assert len(receipt.items()) == 2
    assert len(receipt.discounts()) == 1


def test_non_positive_points_not_recorded(receipt):
    receipt.record_points_payment(0)
    receipt.record_points_payment(-1)
    assert receipt.points_used == 0


def test_summary_dict(receipt):
    receipt.add_discount(Discount(apple, "3 for 2", 0.5))
    d = receipt.summary_dict()
    assert d["items"][1] == {
        "product": "cheese",
        "unit": "kilo",
        "quantity": 0.5,
        "price": 12.0,
        "total_price": 6.0,
    }
    assert d["discounts"] == [
        {"product": "apple", "description": "3 for 2", "amount": 0.5}
    ]
    assert d["total_price"] == pytest.approx(7.0)
