"""Tests for plain-text receipt rendering."""

import pytest

from supermarket.checkout.models import Discount, Product, ProductUnit
from supermarket.checkout.printer import ReceiptPrinter
from supermarket.checkout.receipt import Receipt

apple = Product("apple", ProductUnit.EACH)
toothbrush = Product("toothbrush", ProductUnit.EACH)
apples = Product("apples", ProductUnit.KILO)


@pytest.fixture
def printer():
    return ReceiptPrinter()


@pytest.fixture
def receipt():
    return Receipt()


class TestItems:
    def test_empty_receipt_prints_total(self, printer, receipt):
        output = printer.print_receipt(receipt)
        assert output == "\nTotal:" + " " * 30 + "0.00"

    def test_single_item_has_no_quantity_line(self, printer, receipt):
        receipt.add_product(apple, 1, 0.50, 0.50)
        output = printer.print_receipt(receipt)
        assert output.splitlines()[0] == "apple" + " " * 31 + "0.50"
        assert "*" not in output

    def test_quantity_line(self, printer, receipt):
        receipt.add_product(apple, 3, 0.50, 1.50)
        lines = printer.print_receipt(receipt).splitlines()
        assert lines[0].endswith("1.50")
        assert lines[1] == "  0.50 * 3"

    def test_each_quantity_has_no_decimals(self, printer, receipt):
        receipt.add_product(toothbrush, 5, 0.99, 4.95)
        output = printer.print_receipt(receipt)
        assert "0.99 * 5\n" in output

    def test_kilo_quantity_has_three_decimals(self, printer, receipt):
        receipt.add_product(apples, 2.5, 1.99, 4.975)
        assert "1.99 * 2.500" in printer.print_receipt(receipt)

    def test_each_quantity_half_rounds_up(self, printer, receipt):
        receipt.add_product(toothbrush, 2.5, 1.00, 2.50)
        assert "1.00 * 3\n" in printer.print_receipt(receipt)

    def test_kilo_quantity_half_rounds_up(self, printer, receipt):
        receipt.add_product(apples, 1.0005, 2.00, 2.001)
        assert "2.00 * 1.001\n" in printer.print_receipt(receipt)

    def test_large_quantity_grouped(self, printer, receipt):
        receipt.add_product(toothbrush, 1200, 0.10, 120.00)
        assert "0.10 * 1,200\n" in printer.print_receipt(receipt)

    def test_prices_rounded_to_two_decimals(self, printer, receipt):
        receipt.add_product(apple, 1, 1.999, 1.999)
        assert "2.00" in printer.print_receipt(receipt)

    def test_large_prices_grouped(self, printer, receipt):
        receipt.add_product(apple, 1, 1234.5, 1234.5)
        assert "1,234.50" in printer.print_receipt(receipt)

    def test_every_line_fits_columns(self, receipt):
        receipt.add_product(apple, 3, 0.50, 1.50)
        receipt.add_discount(Discount(apple, "3 for 2", 0.50))
        output = ReceiptPrinter(columns=32).print_receipt(receipt)
        for line in output.splitlines():
            if line and not line.startswith("  "):
                assert len(line) == 32


class TestDiscountsAndTotal:
    def test_discount_line(self, printer, receipt):
        receipt.add_product(toothbrush, 3, 1.00, 3.00)
        receipt.add_discount(Discount(toothbrush, "3 for 2", 1.00))
        output = printer.print_receipt(receipt)
        assert "3 for 2(toothbrush)" in output
        assert "-1.00" in output
        assert output.endswith("2.00")

    def test_points_line(self, printer, receipt):
        receipt.add_product(apple, 10, 1.00, 10.00)
        receipt.record_points_payment(4)
        output = printer.print_receipt(receipt)
        assert "Points:" in output
        assert "-4.00" in output
        assert output.endswith("6.00")

    def test_no_points_line_without_points(self, printer, receipt):
        receipt.add_product(apple, 1, 1.00, 1.00)
        assert "Points:" not in printer.print_receipt(receipt)

    def test_overlong_name_keeps_one_space(self, receipt):
        receipt.add_product(Product("x" * 50), 1, 1.00, 1.00)
        output = ReceiptPrinter(columns=20).print_receipt(receipt)
        assert output.splitlines()[0] == "x" * 50 + " 1.00"


def test_from_config(receipt):
    from supermarket.checkout.config import CheckoutConfig, ReceiptConfig

    printer = ReceiptPrinter.from_config(CheckoutConfig(receipt=ReceiptConfig(columns=20)))
    output = printer.print_receipt(receipt)
    assert output == "\nTotal:" + " " * 10 + "0.00"
